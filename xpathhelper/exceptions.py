#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from typing import Optional


class XPathHelperError(Exception):
    """
    Base exception class for xpathhelper package.

    :param message: the message related to the error.
    :param code: an optional error code.
    """
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super(XPathHelperError, self).__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if not self.code:
            return self.message
        return '[{}] {}'.format(self.code, self.message)


class XPathHelperTypeError(XPathHelperError, TypeError):
    pass


class XPathHelperValueError(XPathHelperError, ValueError):
    pass


class UnterminatedLiteralWarning(UserWarning):
    """
    Issued when the end of an expression is reached inside a quoted literal.
    The partial literal is kept in the output, but the rewritten expression
    won't be accepted by an XPath processor.

    :param expression: the lexed expression.
    :param position: the offset of the opening quote.
    """
    def __init__(self, expression: str, position: int) -> None:
        self.expression = expression
        self.position = position
        super().__init__(
            'unterminated literal at position {} of {!r}'.format(position, expression)
        )


__all__ = ['XPathHelperError', 'XPathHelperTypeError',
           'XPathHelperValueError', 'UnterminatedLiteralWarning']
