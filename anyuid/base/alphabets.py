"""Alphabets.

The position of a symbol is its digit value.

============== ==== ==========================================
name           base symbols
============== ==== ==========================================
BIN            2    `01`
OCT            8    `0-7`
DEC            10   `0-9`
HEX            16   `0-9a-f`
BASE26         26   `a-z`
BASE36         36   `0-9a-z`
BASE62         62   `0-9a-zA-Z`
BASE64         64   `0-9a-zA-Z_-`
NONZERO_DIGITS 9    `1-9`
============== ==== ==========================================

"""

import string

BIN = "01"
OCT = "01234567"
DEC = string.digits
HEX = string.digits + "abcdef"

BASE26 = string.ascii_lowercase
BASE36 = string.digits + string.ascii_lowercase
BASE62 = string.digits + string.ascii_letters
BASE64 = BASE62 + "_" + "-"

# no "0", it reads like the letter "O"
NONZERO_DIGITS = string.digits[1:]
