#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2024, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

# Imports here are considered as stable API, other internal calls may change.

from .exceptions import XPathHelperError, XPathHelperTypeError, \
    XPathHelperValueError, UnterminatedLiteralWarning

from .lexer import Lexer, lex, is_word_boundary
from .modes import RewriteMode, Prefix, Localize
from .cache import RewriteCache, clear_cache
from .namespacer import Namespacer, transform, prefix, localize

__all__ = ['XPathHelperError', 'XPathHelperTypeError', 'XPathHelperValueError',
           'UnterminatedLiteralWarning', 'Lexer', 'lex', 'is_word_boundary',
           'RewriteMode', 'Prefix', 'Localize', 'RewriteCache', 'clear_cache',
           'Namespacer', 'transform', 'prefix', 'localize']
