"""Random identifiers & arbitrary-base conversion.

Convert a number written in one alphabet into another::

   import anyuid

   anyuid.convert(anyuid.base.alphabets.HEX, anyuid.base.alphabets.BIN, "2d5e")
   #> '10110101011110'

Generate a uid over any dictionary::

   anyuid.custom_uid("ACGT", 12)
   #> 'GATTACAGCTAA'

Conversion
==========

.. autosummary::
   :toctree: .

   convert

Identifiers
===========

.. autosummary::
   :toctree: .

   custom_uid
   short_uid
   strong_compact_uid
   short_lowercase_uid
   long_uid
   profanity_safe_uid
   timestamp_id
   generate

Settings & errors
=================

.. autosummary::
   :toctree: .

   settings
   errors

Developer API
=============

.. autosummary::
   :toctree: .

   base
   core
   flavors

"""

# ruff: noqa: I001
# denote a release candidate for 0.1.0 with 0.1rc1, 0.1a1, 0.1b1, etc.
__version__ = "0.3.0"

from . import base, core, errors
from .base.converter import convert
from .base.uids import custom as custom_uid
from .core._settings import settings
from . import flavors
from .flavors import (
    generate,
    long_uid,
    profanity_safe_uid,
    short_lowercase_uid,
    short_uid,
    strong_compact_uid,
    timestamp_id,
)

settings.__doc__ = """Global live settings (:class:`~anyuid.core.Settings`)."""
