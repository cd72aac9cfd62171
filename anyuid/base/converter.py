"""Arbitrary-base conversion.

.. autosummary::
   :toctree: .

   convert
   is_valid

Digit strings are read as unsigned integers of any size, most significant
digit first. The division runs over a list of digit values so that no
intermediate exceeds `len(source_alphabet) * len(destination_alphabet)`.

Examples::

    convert(HEX, BIN, "2d5e")
    #> '10110101011110'
    convert(DEC, HEX, "11614")
    #> '2d5e'

"""

from __future__ import annotations

from lamin_utils import logger

from ..errors import InvalidAlphabet, InvalidInput


def _digit_values(alphabet: str) -> dict[str, int]:
    # first occurrence wins for duplicated symbols
    values: dict[str, int] = {}
    for value, symbol in enumerate(alphabet):
        values.setdefault(symbol, value)
    return values


def _check_alphabet(alphabet: str | None, name: str) -> None:
    if not alphabet:
        raise InvalidAlphabet(f"{name} alphabet is empty")
    if len(alphabet) < 2:
        raise InvalidAlphabet(
            f"{name} alphabet {alphabet!r} needs at least 2 symbols, has {len(alphabet)}"
        )


def is_valid(source_alphabet: str, input: str) -> bool:
    """Check whether every character of `input` is in `source_alphabet`."""
    symbols = set(source_alphabet)
    return all(char in symbols for char in input)


def convert(source_alphabet: str, destination_alphabet: str, input: str) -> str:
    """Convert a digit string from one alphabet to another.

    Args:
        source_alphabet: Symbols of the input base, position is digit value.
        destination_alphabet: Symbols of the output base.
        input: Digit string over `source_alphabet`.

    Returns:
        The same number written over `destination_alphabet`, without leading
        zero symbols. An empty `input` converts to the destination zero symbol
        unless both alphabets are identical, in which case `input` is returned
        as is.

    Raises:
        InvalidAlphabet: If an alphabet is empty or has fewer than 2 symbols.
        InvalidInput: If `input` has a symbol that's not in `source_alphabet`.
    """
    _check_alphabet(source_alphabet, "source")
    _check_alphabet(destination_alphabet, "destination")
    if not is_valid(source_alphabet, input):
        raise InvalidInput(
            f"input {input!r} contains symbols not in alphabet {source_alphabet!r}"
        )
    if source_alphabet == destination_alphabet:
        return input
    if len(set(destination_alphabet)) < len(destination_alphabet):
        logger.debug(
            f"destination alphabet {destination_alphabet!r} has duplicate symbols,"
            " conversion is not reversible"
        )

    from_base = len(source_alphabet)
    to_base = len(destination_alphabet)
    values = _digit_values(source_alphabet)
    digits = [values[char] for char in input]
    length = len(digits)
    result = []
    while True:
        remainder = 0
        new_length = 0
        for i in range(length):
            remainder = remainder * from_base + digits[i]
            if remainder >= to_base:
                digits[new_length] = remainder // to_base
                new_length += 1
                remainder %= to_base
            elif new_length > 0:
                digits[new_length] = 0
                new_length += 1
        length = new_length
        result.append(destination_alphabet[remainder])
        if new_length == 0:
            break
    return "".join(reversed(result))
