import anyuid
import pytest


@pytest.fixture
def ccaplog(caplog):
    """Add caplog handler to our custom logger."""
    from lamin_utils._logger import logger

    logger.addHandler(caplog.handler)

    yield caplog

    logger.removeHandler(caplog.handler)


@pytest.fixture
def restore_settings():
    """Reset the global settings after a test changes them."""
    settings = anyuid.settings
    saved = dict(
        verbosity=settings.verbosity,
        strong_compact_length=settings.strong_compact_length,
        profanity_safe_part_length=settings.profanity_safe_part_length,
        timestamp_precision=settings.timestamp_precision,
    )
    entropy_margin_bytes = settings.entropy_margin_bytes

    yield settings

    for key, value in saved.items():
        setattr(settings, key, value)
    # bypass the setter, restoring 0 shouldn't warn
    settings._entropy_margin_bytes = entropy_margin_bytes
