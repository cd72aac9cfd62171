"""Core library.

Settings:

.. autosummary::
   :toctree: .

   Settings

Clocks:

.. autosummary::
   :toctree: .

   Clock
   SystemClock
   FixedClock

Modules:

.. autosummary::
   :toctree: .

   logger

"""

from lamin_utils import logger

from ._settings import Settings
from .clock import Clock, FixedClock, SystemClock
