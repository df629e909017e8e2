#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import re

###
# Lexical patterns
NCNAME_PATTERN = re.compile(r'^[^\d\W][\w.\-\u00B7\u0300-\u036F\u203F\u2040]*$')
NUMERIC_PATTERN = re.compile(r'^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[Ee][+-]?[0-9]+)?\s*$')


def is_ncname(value: object) -> bool:
    return isinstance(value, str) and NCNAME_PATTERN.fullmatch(value) is not None


def is_numeric(value: str) -> bool:
    """
    Returns `True` if the argument is a numeric string, with an optional
    sign, a fractional part and an exponent (eg. '7', '-1', '2.5', '1e3').
    """
    return NUMERIC_PATTERN.match(value) is not None


def is_ascii_digit(char: str) -> bool:
    return len(char) == 1 and '0' <= char <= '9'


__all__ = ['NCNAME_PATTERN', 'NUMERIC_PATTERN', 'is_ncname',
           'is_numeric', 'is_ascii_digit']
