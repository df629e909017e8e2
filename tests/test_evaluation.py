#!/usr/bin/env python
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
Tests that evaluate the rewritten expressions on a document with a default
namespace, using the XPath processors of lxml and elementpath.
"""
import unittest
from xml.etree import ElementTree

try:
    import lxml.etree as lxml_etree
except ImportError:
    lxml_etree = None

try:
    import elementpath
except ImportError:
    elementpath = None

from xpathhelper import prefix, localize

LIBRARY_NAMESPACE = 'http://xpath.test/library'

LIBRARY_XML = """<library xmlns="http://xpath.test/library">
  <book id="b1" lang="en">
    <title>Dive into XML</title>
    <price>10</price>
  </book>
  <book id="b2">
    <title>or and div</title>
    <price>20</price>
  </book>
  <magazine id="m1">
    <title>XPath Monthly</title>
  </magazine>
</library>"""


@unittest.skipIf(lxml_etree is None, "The lxml library is not installed")
class LxmlEvaluationTest(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.root = lxml_etree.XML(LIBRARY_XML.encode())
        cls.namespaces = {'x': LIBRARY_NAMESPACE}

    def prefixed_xpath(self, path):
        return self.root.xpath(prefix(path), namespaces=self.namespaces)

    def localized_xpath(self, path):
        return self.root.xpath(localize(path))

    def check_titles(self, path, expected):
        for results in (self.prefixed_xpath(path), self.localized_xpath(path)):
            self.assertListEqual([e.text for e in results], expected)

    def test_unprefixed_paths_select_nothing(self):
        self.assertListEqual(self.root.xpath('/library/book'), [])

    def test_absolute_paths(self):
        self.assertEqual(len(self.prefixed_xpath('/library/book')), 2)
        self.assertEqual(len(self.localized_xpath('/library/book')), 2)
        self.check_titles('//book/title', ['Dive into XML', 'or and div'])
        self.check_titles('/library/*/title',
                          ['Dive into XML', 'or and div', 'XPath Monthly'])

    def test_predicates(self):
        self.check_titles('//book[@id="b2"]/title', ['or and div'])
        self.check_titles('//book[price > 15]/title', ['or and div'])
        self.check_titles('//book[price = 10 or price = 20]/title',
                          ['Dive into XML', 'or and div'])
        self.check_titles('//*[@id and title]/title',
                          ['Dive into XML', 'or and div', 'XPath Monthly'])
        self.check_titles("//title[starts-with(., 'XPath')]", ['XPath Monthly'])
        self.check_titles('//title[contains(., "or and")]', ['or and div'])

    def test_axes(self):
        self.check_titles('child::book/child::title', ['Dive into XML', 'or and div'])
        self.check_titles('//price/preceding-sibling::title', ['Dive into XML', 'or and div'])
        self.assertListEqual(self.prefixed_xpath('//book/attribute::lang'), ['en'])
        self.assertListEqual(self.localized_xpath('//book/attribute::lang'), ['en'])
        self.assertListEqual(self.prefixed_xpath('//book[1]/@id'), ['b1'])

    def test_functions_and_numbers(self):
        self.assertEqual(self.prefixed_xpath('count(//book)'), 2.0)
        self.assertEqual(self.localized_xpath('count(//book)'), 2.0)
        self.assertEqual(self.prefixed_xpath('sum(//price) div 2 - 1'), 14.0)
        self.assertEqual(self.localized_xpath('sum(//price) mod 7'), 2.0)
        self.assertEqual(self.prefixed_xpath('string(//magazine/@id)'), 'm1')

    def test_union(self):
        self.check_titles('//magazine/title | //book[1]/title',
                          ['Dive into XML', 'XPath Monthly'])

    def test_custom_prefix(self):
        results = self.root.xpath(prefix('/library/magazine', 'lib'),
                                  namespaces={'lib': LIBRARY_NAMESPACE})
        self.assertListEqual([e.get('id') for e in results], ['m1'])


@unittest.skipIf(elementpath is None, "The elementpath library is not installed")
class ElementPathEvaluationTest(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.document = ElementTree.ElementTree(ElementTree.XML(LIBRARY_XML))
        cls.namespaces = {'x': LIBRARY_NAMESPACE}

    def check_titles(self, path, expected):
        results = elementpath.select(self.document, prefix(path), self.namespaces)
        self.assertListEqual([e.text for e in results], expected)
        results = elementpath.select(self.document, localize(path))
        self.assertListEqual([e.text for e in results], expected)

    def test_paths(self):
        self.check_titles('/library/book/title', ['Dive into XML', 'or and div'])
        self.check_titles('//book[@id="b1"]/title', ['Dive into XML'])
        self.check_titles('//book[price > 15]/title', ['or and div'])
        self.check_titles('//magazine/title | //book[2]/title',
                          ['or and div', 'XPath Monthly'])

    def test_attributes_and_functions(self):
        self.assertListEqual(
            elementpath.select(self.document, prefix('//book/attribute::lang'),
                               self.namespaces), ['en']
        )
        self.assertEqual(
            elementpath.select(self.document, prefix('count(//book)'), self.namespaces), 2
        )
        self.assertEqual(elementpath.select(self.document, localize('count(/library/*)')), 3)


if __name__ == '__main__':
    unittest.main()
