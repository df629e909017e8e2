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
Rewrite modes, that define how an unprefixed element name is rewritten.
"""
from abc import ABCMeta, abstractmethod
from typing import Any, Optional, Tuple

from .exceptions import XPathHelperTypeError, XPathHelperValueError
from .helpers import is_ncname

DEFAULT_PREFIX = 'x'

ModeKeyType = Tuple[str, Optional[str]]


class RewriteMode(metaclass=ABCMeta):
    """
    Abstract base class for rewrite modes. A mode is an immutable value,
    identified by its *key*, that can be used as a cache key.
    """
    name: str

    @property
    def key(self) -> ModeKeyType:
        return self.name, None

    @abstractmethod
    def rewrite(self, name: str) -> str:
        """Rewrites an unprefixed element name."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RewriteMode):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("{!r} object is immutable".format(self.__class__.__name__))


class Prefix(RewriteMode):
    """
    Rewrites element names adding a namespace prefix, eg. 'div' -> 'x:div'.

    :param prefix: the namespace prefix to use, must be an NCName.
    """
    name = 'prefix'
    prefix: str

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        if not isinstance(prefix, str):
            msg = 'a namespace prefix must be a string, not {!r}'
            raise XPathHelperTypeError(msg.format(type(prefix)))
        elif not is_ncname(prefix):
            raise XPathHelperValueError(
                '{!r} is not a valid namespace prefix'.format(prefix), code='prefix'
            )
        object.__setattr__(self, 'prefix', prefix)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.prefix)

    @property
    def key(self) -> ModeKeyType:
        return self.name, self.prefix

    def rewrite(self, name: str) -> str:
        return '%s:%s' % (self.prefix, name)


class Localize(RewriteMode):
    """
    Rewrites element names into namespace agnostic steps,
    eg. 'div' -> '*[local-name() = "div"]'.
    """
    name = 'localize'

    def __repr__(self) -> str:
        return '%s()' % self.__class__.__name__

    def rewrite(self, name: str) -> str:
        return '*[local-name() = "%s"]' % name


__all__ = ['DEFAULT_PREFIX', 'RewriteMode', 'Prefix', 'Localize']
