"""Base library.

Pure building blocks, no settings needed beyond the entropy margin.

Modules
-------

.. autosummary::
   :toctree: .

   alphabets
   converter
   uids

"""

from . import alphabets, converter, uids
