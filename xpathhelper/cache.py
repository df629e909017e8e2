#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import logging
import threading
from collections import OrderedDict
from typing import Optional, Tuple

from .exceptions import XPathHelperValueError
from .modes import ModeKeyType, RewriteMode

logger = logging.getLogger(__name__)

CacheKeyType = Tuple[ModeKeyType, str]


class RewriteCache:
    """
    A thread-safe memoization store for rewritten expressions, keyed by
    the rewrite mode and the original expression. Concurrent computations
    of the same key are allowed, the first stored value is kept.

    :param maxsize: the maximum number of entries. For default the cache \
    is unbounded, otherwise the oldest entries are discarded first.
    """
    def __init__(self, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and maxsize <= 0:
            raise XPathHelperValueError('maxsize must be a positive integer')
        self.maxsize = maxsize
        self._lock = threading.Lock()
        self._entries: 'OrderedDict[CacheKeyType, str]' = OrderedDict()

    def __repr__(self) -> str:
        return '%s(maxsize=%r)' % (self.__class__.__name__, self.maxsize)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, mode: RewriteMode, expression: str) -> Optional[str]:
        key = mode.key, expression
        with self._lock:
            value = self._entries.get(key)

        if value is None:
            logger.debug("cache miss for %r with %r", expression, mode)
        return value

    def put(self, mode: RewriteMode, expression: str, value: str) -> str:
        """Stores a value if the key is missing. Returns the stored value."""
        key = mode.key, expression
        with self._lock:
            value = self._entries.setdefault(key, value)
            if self.maxsize is not None:
                while len(self._entries) > self.maxsize:
                    self._entries.popitem(last=False)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


default_cache = RewriteCache()


def clear_cache() -> None:
    """Empties the process-wide cache used by :func:`xpathhelper.transform`."""
    default_cache.clear()


__all__ = ['RewriteCache', 'default_cache', 'clear_cache']
