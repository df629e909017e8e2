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
Pseudo-parser for XPath expressions.

When an XML document has a default namespace its elements can't be selected
by XPath 1.0 expressions with unprefixed names. The :class:`Namespacer` takes
an expression like `/div/li[@id = "list"]` and rewrites it as
`/x:div/x:li[@id = "list"]` or as
`/*[local-name() = "div"]/*[local-name() = "li"][@id = "list"]`.

The rewriting is lexical: the tokens of the expression are classified
with a table of rules and only the tokens recognized as element names
are rewritten. The expression is not validated.
"""
from typing import ClassVar, FrozenSet, List, Optional, Tuple, Union

from .exceptions import XPathHelperTypeError
from .helpers import is_numeric, is_ascii_digit
from .lexer import Lexer
from .modes import DEFAULT_PREFIX, RewriteMode, Prefix, Localize
from .cache import RewriteCache, default_cache

OPERATORS = frozenset(('or', 'and', 'div', 'mod'))

PATH_SEPARATORS = frozenset(('/', '//'))


class Namespacer:
    """
    Rewrites the element names of an XPath expression.

    :param expression: the XPath expression.
    :param mode: the rewrite mode, an instance of :class:`Prefix` or :class:`Localize`.
    :param lexer: an optional lexer instance, for default a new :class:`Lexer` is used.

    :cvar operators: the names that are operators when not used as a path step.
    :cvar rules: the ordered classification rules, couples of a rule name \
    and the name of the predicate method. The first matching rule wins, if \
    none matches the token is an element name.
    """
    operators: ClassVar[FrozenSet[str]] = OPERATORS

    rules: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ('boundary', 'is_boundary'),
        ('literal', 'is_attribute_or_literal'),
        ('number', 'is_number'),
        ('qname', 'is_prefixed_name'),
        ('function', 'is_function_call'),
        ('operator', 'is_operator'),
        ('axis', 'is_axis'),
        ('attribute', 'is_attribute_axis_target'),
        ('minus', 'is_minus'),
    )

    tokens: List[str]
    cursor: int = 0

    def __init__(self, expression: str,
                 mode: RewriteMode,
                 lexer: Optional[Lexer] = None) -> None:
        if not isinstance(mode, RewriteMode):
            msg = 'mode must be a RewriteMode instance, not {!r}'
            raise XPathHelperTypeError(msg.format(type(mode)))

        self.expression = expression
        self.mode = mode
        self.lexer = lexer if lexer is not None else Lexer()
        self.tokens = self.lexer.lex(expression)

    def __repr__(self) -> str:
        return '%s(%r, %r)' % (self.__class__.__name__, self.expression, self.mode)

    def parse(self) -> str:
        """Returns the rewritten XPath expression."""
        output: List[str] = []
        self.cursor = 0

        while self.cursor < len(self.tokens):
            token = self.tokens[self.cursor]
            rule = self.classify()

            if rule == 'qname':
                output.append(''.join(self.tokens[self.cursor:self.cursor + 3]))
                self.cursor += 3
                continue
            elif rule is None:
                output.append(self.mode.rewrite(token))
            else:
                output.append(token)
            self.cursor += 1

        return ''.join(output)

    def classify(self) -> Optional[str]:
        """
        Returns the name of the first rule that matches the token at the
        current position, or `None` if the token is an element name.
        """
        token = self.tokens[self.cursor]
        for name, predicate in self.rules:
            if getattr(self, predicate)(token):
                return name
        return None

    ###
    # Token navigation
    def peek(self, offset: int) -> str:
        """
        Returns the token at an offset from the current position,
        or an empty string if the position is out of range.
        """
        index = self.cursor + offset
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return ''

    def non_space(self, offset: int) -> str:
        """
        Returns the nth non-space token from the current position, forward
        for a positive offset, backward for a negative offset. An empty
        string is returned if the start or the end is reached.
        """
        step = 1 if offset > 0 else -1
        count = abs(offset)
        k = 0
        while True:
            k += step
            token = self.peek(k)
            if token != ' ':
                count -= 1
                if not count or not token:
                    return token

    ###
    # Classification rules
    def is_boundary(self, token: str) -> bool:
        return self.lexer.is_word_boundary(token)

    @staticmethod
    def is_attribute_or_literal(token: str) -> bool:
        return token[0] in ('@', '"', "'")

    @staticmethod
    def is_number(token: str) -> bool:
        return is_numeric(token) or is_ascii_digit(token[0])

    def is_prefixed_name(self, token: str) -> bool:
        """A prefixed name, eg. 'fire:breather', is lexed as three adjacent tokens."""
        return self.peek(1) == ':'

    def is_function_call(self, token: str) -> bool:
        # Spaces are allowed before the parenthesis: contains  (@id, "thing")
        return self.non_space(1) == '('

    def is_operator(self, token: str) -> bool:
        if token.lower() not in self.operators:
            return False
        return self.non_space(-1) not in PATH_SEPARATORS

    def is_axis(self, token: str) -> bool:
        return self.non_space(1) == '::'

    def is_attribute_axis_target(self, token: str) -> bool:
        return self.non_space(-1) == '::' and self.non_space(-2) == 'attribute'

    @staticmethod
    def is_minus(token: str) -> bool:
        # Subtraction written with spaces, eg. 2 - 1
        return token == '-'


def transform(expression: str,
              mode: RewriteMode,
              cache: Optional[RewriteCache] = default_cache) -> str:
    """
    Rewrites an XPath expression for a document with a default namespace.

    :param expression: the XPath expression.
    :param mode: the rewrite mode.
    :param cache: the cache to use, the process-wide cache for default. \
    Provide `None` to disable memoization.
    :return: the rewritten expression.
    """
    if not isinstance(expression, str):
        msg = 'an XPath expression must be a string, not {!r}'
        raise XPathHelperTypeError(msg.format(type(expression)))
    elif not isinstance(mode, RewriteMode):
        msg = 'mode must be a RewriteMode instance, not {!r}'
        raise XPathHelperTypeError(msg.format(type(mode)))

    if cache is None:
        return Namespacer(expression, mode).parse()

    result = cache.get(mode, expression)
    if result is None:
        result = cache.put(mode, expression, Namespacer(expression, mode).parse())
    return result


def prefix(expression: str,
           prefix: Union[str, Prefix] = DEFAULT_PREFIX,
           cache: Optional[RewriteCache] = default_cache) -> str:
    """
    Prefixes the element names of an XPath expression, eg. '//div/a'
    is converted to '//x:div/x:a'.

    :param expression: the XPath expression.
    :param prefix: the namespace prefix, 'x' for default.
    :param cache: the cache to use, `None` disables memoization.
    """
    mode = prefix if isinstance(prefix, Prefix) else Prefix(prefix)
    return transform(expression, mode, cache)


def localize(expression: str, cache: Optional[RewriteCache] = default_cache) -> str:
    """
    Localizes the element names of an XPath expression, eg. '//div/a' is
    converted to '//*[local-name() = "div"]/*[local-name() = "a"]'.

    :param expression: the XPath expression.
    :param cache: the cache to use, `None` disables memoization.
    """
    return transform(expression, Localize(), cache)


__all__ = ['OPERATORS', 'PATH_SEPARATORS', 'Namespacer',
           'transform', 'prefix', 'localize']
