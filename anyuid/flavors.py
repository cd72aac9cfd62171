"""Identifier flavors.

Named configurations of :func:`~anyuid.base.uids.custom`, of :func:`uuid.uuid4`
or of a clock.

.. autosummary::
   :toctree: .

   short_uid
   strong_compact_uid
   short_lowercase_uid
   long_uid
   profanity_safe_uid
   timestamp_id
   generate
   Flavor

============================= ============ =========================== ======
flavor                        example      possible uids               length
============================= ============ =========================== ======
`short`                       `14usBY8...` `62**16=5e+28`              16
`strong_compact` (default 22) `6ptGBhT...` `62**22=3e+39`              20, 22
`short_lowercase`             `15amp61...` `36**20=1e+31`              20
`long`                        `3e3b35a9-.` `2**122=5e+36`              32, 36
`profanity_safe` (default 10) `4a8g6z1...` `9**10 * 26**10=5e+23`      16-20
`timestamp`                   `2022-1-1..` not unique                  18-31
============================= ============ =========================== ======

"""

from __future__ import annotations

import uuid
from typing import Callable, NamedTuple

from .base.alphabets import BASE26, BASE36, BASE62, NONZERO_DIGITS
from .base.uids import custom
from .core._settings import settings
from .core.clock import Clock, SystemClock
from .errors import InvalidArgument


class Flavor(NamedTuple):
    """Dictionary-based flavor.

    `length` is either a fixed length or the name of the setting holding it.
    """

    name: str
    dictionary: str
    length: int | str

    def resolve_length(self) -> int:
        if isinstance(self.length, str):
            return getattr(settings, self.length)
        return self.length

    def __call__(self) -> str:
        return custom(self.dictionary, self.resolve_length())


SHORT = Flavor("short", BASE62, 16)
STRONG_COMPACT = Flavor("strong_compact", BASE62, "strong_compact_length")
SHORT_LOWERCASE = Flavor("short_lowercase", BASE36, 20)


def short_uid() -> str:
    """Short uid of 16 digits & letters.

    Use when you need a strong but very short unique id.

    Example: `"14usBY8xSYXGPvsA"`.
    """
    return SHORT()


def strong_compact_uid() -> str:
    """Compact uid of digits & letters, see `settings.strong_compact_length`.

    Use when you need a very strong but still compact unique id.

    Example: `"6ptGBhTKkxTMCMEiiHiwwj"`.
    """
    return STRONG_COMPACT()


def short_lowercase_uid() -> str:
    """Short uid of 20 digits & lowercase letters.

    Example: `"15amp61jbnu6dzmhxa0i"`.
    """
    return SHORT_LOWERCASE()


def long_uid(remove_hyphens: bool = False) -> str:
    """RFC 4122 version 4 uuid.

    Args:
        remove_hyphens: Return the 32 hex digits without the 4 hyphens.

    Example: `"3e3b35a9-448b-4142-9a92-cb58e5bbafc6"`.
    """
    value = uuid.uuid4()
    if remove_hyphens:
        return value.hex
    return str(value)


def profanity_safe_uid() -> str:
    """Uid alternating a digit with a lowercase letter.

    The alternation keeps words from forming by chance, use it for ids shown
    to users. Has `2 * settings.profanity_safe_part_length` characters.

    Example: `"4a8g6z1w7d1a8d1o9o3o"`.
    """
    part_length = settings.profanity_safe_part_length
    digits = custom(NONZERO_DIGITS, part_length)
    letters = custom(BASE26, part_length)
    return "".join(digit + letter for digit, letter in zip(digits, letters))


def timestamp_id(clock: Clock | None = None) -> str:
    """Id made of the current local time.

    Formatted as `year-month-day-T-hour-minute-second-subsecond` without zero
    padding, e.g., `"2022-1-18-T-22-28-38-831164666"`. The sub-second field is
    in nanoseconds unless `settings.timestamp_precision` is `'ms'`.

    Not unique across processes or fast successive calls, and not of fixed
    length.

    Args:
        clock: Time source, defaults to the system clock.
    """
    if clock is None:
        clock = SystemClock(settings.timestamp_precision)
    now, subsecond = clock.now()
    return (
        f"{now.year}-{now.month}-{now.day}-T-"
        f"{now.hour}-{now.minute}-{now.second}-{subsecond}"
    )


FLAVORS: dict[str, Callable[..., str]] = {
    "short": short_uid,
    "strong_compact": strong_compact_uid,
    "short_lowercase": short_lowercase_uid,
    "long": long_uid,
    "profanity_safe": profanity_safe_uid,
    "timestamp": timestamp_id,
}


def generate(flavor: str, **kwargs) -> str:
    """Generate an id of the named flavor.

    Keyword arguments are passed on, e.g., `generate("long", remove_hyphens=True)`.
    """
    try:
        generator = FLAVORS[flavor]
    except KeyError:
        raise InvalidArgument(
            f"unknown flavor {flavor!r}, choose one of {list(FLAVORS)}"
        ) from None
    return generator(**kwargs)
