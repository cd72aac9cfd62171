"""Errors.

.. autoexception:: InvalidArgument
.. autoexception:: InvalidAlphabet
.. autoexception:: InvalidInput

"""


class InvalidArgument(Exception):
    """Invalid method or function argument."""

    pass


class InvalidAlphabet(InvalidArgument):
    """Alphabet is empty, missing or has fewer than two symbols."""

    pass


class InvalidInput(InvalidArgument):
    """Digit string contains a symbol that's not in the source alphabet."""

    pass
