"""Random uids over any dictionary.

Base generator:

.. autosummary::
   :toctree: .

   custom
   entropy_bytes

Fixed-dictionary generators:

.. autosummary::
   :toctree: .

   base26
   base36
   base62
   base64

`uid` generators:

.. autosummary::
   :toctree: .

   base62_8
   base62_12
   base62_16
   base62_20
   base62_24


How it works
============

A uid of `length` symbols over a dictionary of `n` symbols is one of
`n ** length` values. :func:`custom` draws enough random bytes to cover that
space, writes them as a hex number and converts the number to the dictionary
with :func:`~anyuid.base.converter.convert`. The rightmost `length` symbols
are kept, left-padded with the dictionary's first symbol when the number is
short.

Duplicate symbols in a dictionary are allowed and make that symbol
proportionally more likely, e.g. `"AAAAABCDEF"` yields `"A"` half of the time.

Collision probabilities
=======================

8 base62 characters (`62**8=2e+14`):

======= ===========
n       p_collision
======= ===========
100k    2e-05
1M      2e-03
======= ===========

16 base62 characters (`62**16=5e+28`):

======= ===========
n       p_collision
======= ===========
1e12    7e-05
1e13    7e-03
======= ===========

22 base62 characters (`62**22=3e+39`):

======= ===========
n       p_collision
======= ===========
1e18    2e-04
1e19    2e-02
======= ===========

"""

from __future__ import annotations

import secrets
from typing import Callable

from lamin_utils import logger

from ..core._settings import settings
from ..errors import InvalidAlphabet
from .alphabets import BASE26, BASE36, BASE62, BASE64, HEX
from .converter import convert


def entropy_bytes(n_symbols: int, length: int) -> int:
    """Minimum number of random bytes covering `n_symbols ** length` values."""
    space = n_symbols**length
    # exact ceil(log2(space)) for space >= 1
    n_bits = (space - 1).bit_length()
    return (n_bits + 7) // 8


def custom(
    dictionary: str,
    length: int,
    *,
    token_bytes: Callable[[int], bytes] | None = None,
) -> str:
    """Random uid of exactly `length` symbols from `dictionary`.

    Args:
        dictionary: Symbols to draw from, duplicates weight a symbol.
        length: Number of symbols.
        token_bytes: Source of random bytes, defaults to :func:`secrets.token_bytes`.

    Example::

        custom("AB", 5)
        #> 'ABABB'
    """
    if not dictionary:
        raise InvalidAlphabet("dictionary is empty")
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise ValueError(f"length must be a non-negative integer, got {length!r}")
    if length == 0:
        return ""
    if len(dictionary) == 1:
        return dictionary * length
    if token_bytes is None:
        token_bytes = secrets.token_bytes
    n_bytes = entropy_bytes(len(dictionary), length) + settings.entropy_margin_bytes
    logger.debug(f"drawing {n_bytes} bytes for {length} symbols of base {len(dictionary)}")
    random_hex = token_bytes(n_bytes).hex()
    translated = convert(HEX, dictionary, random_hex)
    # shorter if the number has leading zeros, longer if the bytes overshoot
    if len(translated) < length:
        return translated.rjust(length, dictionary[0])
    return translated[-length:]


def base26(n_char: int) -> str:
    """ASCII lowercase."""
    return custom(BASE26, n_char)


def base36(n_char: int) -> str:
    """Digits & ASCII lowercase."""
    return custom(BASE36, n_char)


def base62(n_char: int) -> str:
    """Random Base62 string."""
    return custom(BASE62, n_char)


def base64(n_char: int) -> str:
    """Random Base64 string."""
    return custom(BASE64, n_char)


def base62_8() -> str:
    """Random Base62 string of length 8."""
    return base62(8)


def base62_12() -> str:
    """Random Base62 string of length 12."""
    return base62(12)


def base62_16() -> str:
    """Random Base62 string of length 16."""
    return base62(16)


def base62_20() -> str:
    """Random Base62 string of length 20."""
    return base62(20)


def base62_24() -> str:
    return base62(24)
