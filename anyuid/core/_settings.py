from __future__ import annotations

import os
import sys

from lamin_utils import colors, logger

from ..errors import InvalidArgument

VERBOSITY_TO_INT = {
    "error": 0,  # 40
    "warning": 1,  # 30
    "success": 2,  # 25
    "info": 3,  # 20
    "hint": 4,  # 15
    "debug": 5,  # 10
}
VERBOSITY_TO_STR: dict[int, str] = dict(
    [reversed(i) for i in VERBOSITY_TO_INT.items()]  # type: ignore
)

STRONG_COMPACT_LENGTHS = (20, 22)
PROFANITY_SAFE_PART_LENGTHS = (8, 9, 10)
TIMESTAMP_PRECISIONS = ("ns", "ms")


class Settings:
    """Settings.

    Please use the global `anyuid.settings` object instead of instantiating this class yourself.
    """

    def __init__(self):
        self._verbosity_int: int = 1  # warning-level logging
        self._entropy_margin_bytes: int = 2
        self._strong_compact_length: int = 22
        self._profanity_safe_part_length: int = 10
        self._timestamp_precision: str = "ns"
        if os.environ.get("ANYUID_VERBOSITY") is not None:
            verbosity = os.environ["ANYUID_VERBOSITY"]
            self.verbosity = int(verbosity) if verbosity.isdigit() else verbosity
        else:
            logger.set_verbosity(self._verbosity_int)
        if os.environ.get("ANYUID_ENTROPY_MARGIN_BYTES") is not None:
            self.entropy_margin_bytes = int(os.environ["ANYUID_ENTROPY_MARGIN_BYTES"])

    def __repr__(self) -> str:  # pragma: no cover
        if "sphinx" in sys.modules:
            return object.__repr__(self)

        cls_name = colors.green(self.__class__.__name__)
        verbosity_color = colors.yellow if self.verbosity == "warning" else colors.green
        margin_color = colors.yellow if self.entropy_margin_bytes == 0 else colors.green

        lines = [
            f"{cls_name}",
            f"  verbosity: {verbosity_color(self.verbosity)}",
            f"  entropy_margin_bytes: {margin_color(str(self.entropy_margin_bytes))}",
            f"  strong_compact_length: {self.strong_compact_length}",
            f"  profanity_safe_part_length: {self.profanity_safe_part_length}",
            f"  timestamp_precision: {colors.italic(self.timestamp_precision)}",
        ]
        return "\n".join(lines)

    @property
    def entropy_margin_bytes(self) -> int:
        """Random bytes drawn on top of the minimum for custom uids (default `2`).

        A uid of `length` symbols over a dictionary of size `n` needs at least
        `ceil(log2(n ** length) / 8)` random bytes. Reducing that many bytes to
        the `n ** length` possible uids favors some uids by up to one
        pre-image. Every extra byte divides that bias by 256.

        Set to `0` to draw exactly the minimum.
        """
        return self._entropy_margin_bytes

    @entropy_margin_bytes.setter
    def entropy_margin_bytes(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise InvalidArgument(
                f"entropy_margin_bytes must be a non-negative integer, got {value!r}"
            )
        if value == 0:
            logger.warning(
                "entropy margin disabled, uids over dictionaries whose size isn't a"
                " power of 2 won't be uniformly distributed"
            )
        self._entropy_margin_bytes = value

    @property
    def strong_compact_length(self) -> int:
        """Length of strong-compact uids, `20` or `22` (default `22`)."""
        return self._strong_compact_length

    @strong_compact_length.setter
    def strong_compact_length(self, value: int):
        if value not in STRONG_COMPACT_LENGTHS:
            raise InvalidArgument(
                f"strong_compact_length must be one of {STRONG_COMPACT_LENGTHS}, got {value!r}"
            )
        self._strong_compact_length = value

    @property
    def profanity_safe_part_length(self) -> int:
        """Digits (and letters) in a profanity-safe uid, `8`, `9` or `10` (default `10`).

        The uid has twice this many characters.
        """
        return self._profanity_safe_part_length

    @profanity_safe_part_length.setter
    def profanity_safe_part_length(self, value: int):
        if value not in PROFANITY_SAFE_PART_LENGTHS:
            raise InvalidArgument(
                f"profanity_safe_part_length must be one of {PROFANITY_SAFE_PART_LENGTHS}, got {value!r}"
            )
        self._profanity_safe_part_length = value

    @property
    def timestamp_precision(self) -> str:
        """Sub-second field of timestamp ids, `'ns'` or `'ms'` (default `'ns'`)."""
        return self._timestamp_precision

    @timestamp_precision.setter
    def timestamp_precision(self, value: str):
        if value not in TIMESTAMP_PRECISIONS:
            raise InvalidArgument(
                f"timestamp_precision must be one of {TIMESTAMP_PRECISIONS}, got {value!r}"
            )
        self._timestamp_precision = value

    @property
    def verbosity(self) -> str:
        """Logger verbosity (default `'warning'`).

        - `'error'`: only show error messages
        - `'warning'`: also show warning messages
        - `'success'`: also show success messages
        - `'info'`: also show info messages
        - `'hint'`: also show hint messages
        - `'debug'`: also show detailed debug messages
        """
        return VERBOSITY_TO_STR[self._verbosity_int]

    @verbosity.setter
    def verbosity(self, verbosity: str | int):
        if isinstance(verbosity, str):
            if verbosity not in VERBOSITY_TO_INT:
                raise InvalidArgument(
                    f"verbosity must be one of {list(VERBOSITY_TO_INT)}, got {verbosity!r}"
                )
            verbosity_int = VERBOSITY_TO_INT[verbosity]
        else:
            if verbosity not in VERBOSITY_TO_STR:
                raise InvalidArgument(
                    f"verbosity must be between 0 and 5, got {verbosity!r}"
                )
            verbosity_int = verbosity
        self._verbosity_int = verbosity_int
        logger.set_verbosity(verbosity_int)


settings = Settings()
