#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the lexer that splits an XPath expression into string tokens.
"""
import warnings
from typing import ClassVar, FrozenSet, List

from .exceptions import XPathHelperTypeError, UnterminatedLiteralWarning

WORD_BOUNDARIES = frozenset((
    '[', ']', '=', '(', ')', '.', '<', '>', '*', '+', '!', '|', ',',
    ' ', '"', "'", ':', '::', '/', '//', '@',
))
"""
Tokens that terminate a word. The minus is not included because it's
used in element names and in function names (eg. 'starts-with').
"""


class Lexer:
    """
    A lexer for XPath expressions. Splits an expression into a list of string
    tokens, where each token is a word boundary symbol, an attribute reference
    (eg. '@id'), a quoted literal including its quotes or a word. No token is
    skipped, so joining the tokens reproduces the lexed expression.

    The lexer holds its scanning state only during a call of :meth:`lex`,
    so an instance can be reused for lexing other expressions.

    :cvar word_boundaries: the set of tokens that terminate a word.
    """
    word_boundaries: ClassVar[FrozenSet[str]] = WORD_BOUNDARIES

    expression: str = ''
    cursor: int = 0
    length: int = 0

    def __repr__(self) -> str:
        return '%s()' % self.__class__.__name__

    @classmethod
    def is_word_boundary(cls, token: str) -> bool:
        """Returns `True` if the token is a word boundary, `False` otherwise."""
        return token in cls.word_boundaries

    def lex(self, expression: str) -> List[str]:
        """
        Lexes an XPath expression.

        :param expression: an XPath expression.
        :return: a list of tokens, empty for an empty expression.
        """
        if not isinstance(expression, str):
            msg = 'an XPath expression must be a string, not {!r}'
            raise XPathHelperTypeError(msg.format(type(expression)))

        self.expression = expression
        self.length = len(expression)
        self.cursor = 0

        tokens: List[str] = []
        try:
            while self.cursor < self.length:
                tokens.append(self.read_token())
        finally:
            self.expression = ''
            self.length = self.cursor = 0

        return tokens

    def read_token(self) -> str:
        char = self.expression[self.cursor]

        if char == '/':
            return self.read_one_or_two('/')
        elif char == '"' or char == "'":
            return self.read_literal(char)
        elif char == ':':
            return self.read_one_or_two(':')
        elif char == '@':
            self.cursor += 1
            return '@' + self.read_word()
        elif char in self.word_boundaries:
            self.cursor += 1
            return char
        else:
            return self.read_word()

    def read_word(self) -> str:
        """Reads the characters until the next word boundary."""
        start = self.cursor
        while self.cursor < self.length:
            if self.expression[self.cursor] in self.word_boundaries:
                break
            self.cursor += 1
        return self.expression[start:self.cursor]

    def read_one_or_two(self, char: str) -> str:
        """Reads a '/' or a '//', a ':' or a '::'."""
        if self.expression.startswith(char * 2, self.cursor):
            self.cursor += 2
            return char * 2
        self.cursor += 1
        return char

    def read_literal(self, quote: str) -> str:
        """
        Reads a quoted literal, including the quotes. If the literal is not
        closed the rest of the expression is returned, and a warning is issued.
        """
        start = self.cursor
        end = self.expression.find(quote, start + 1)
        if end < 0:
            warnings.warn(UnterminatedLiteralWarning(self.expression, start), stacklevel=4)
            self.cursor = self.length
        else:
            self.cursor = end + 1
        return self.expression[start:self.cursor]


def lex(expression: str) -> List[str]:
    """Lexes an XPath expression with a new lexer instance."""
    return Lexer().lex(expression)


def is_word_boundary(token: str) -> bool:
    return Lexer.is_word_boundary(token)


__all__ = ['WORD_BOUNDARIES', 'Lexer', 'lex', 'is_word_boundary']
