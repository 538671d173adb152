"""
# Writers-Mark: test_spans.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `spans.py`.
"""

import unittest
import warnings

from writersmark.spans import apply_span_rules, extract_links, find_closing, resolve_contents, slice_fragments
from writersmark.style import StyleLookupTable, compile_style
from writersmark.tree import Link, Span
from writersmark.whitelist import compile_whitelist

BLANK_WHITELIST = compile_whitelist({'para': [], 'span': [], 'cont': []})


def make_lookup_table(style_sheet):
    return StyleLookupTable([compile_style(style_sheet, BLANK_WHITELIST)])


class TestExtractLinks(unittest.TestCase):
    def test_no_links(self):
        self.assertEqual(extract_links(''), [])
        self.assertEqual(extract_links('plain'), ['plain'])
        self.assertEqual(extract_links('[url] (content)'), ['[url] (content)'])
        self.assertEqual(extract_links('[url](content'), ['[url](content'])

    def test_links(self):
        self.assertEqual(
            extract_links('see [https://example.com](here) now'),
            ['see ', Link('https://example.com', ['here']), ' now'],
        )
        self.assertEqual(
            extract_links('[a](b)[c](d)'),
            [Link('a', ['b']), Link('c', ['d'])],
        )
        self.assertEqual(extract_links('[a]()'), [Link('a', [])])
        self.assertEqual(extract_links('[](b)'), [Link('', ['b'])])


class TestHelpers(unittest.TestCase):
    def test_find_closing(self):
        self.assertEqual(find_closing(['a*b*c'], 0, 2, '*'), (0, 3))
        self.assertEqual(find_closing(['a**'], 0, 2, '*'), None)
        self.assertEqual(find_closing(['a*', Link('u'), 'b*'], 0, 2, '*'), (2, 1))
        self.assertEqual(find_closing(['a*', Link('u', ['*'])], 0, 2, '*'), None)

    def test_slice_fragments(self):
        fragments = ['ab*cd', Link('u'), 'ef*gh']
        self.assertEqual(slice_fragments(fragments, 0, 1, 0, 2), ['b'])
        self.assertEqual(slice_fragments(fragments, 0, 1, 0, 1), [])
        self.assertEqual(slice_fragments(fragments, 0, 3, 2, 2), ['cd', Link('u'), 'ef'])
        self.assertEqual(slice_fragments(fragments, 0, 5, 2, 0), [Link('u')])


class TestApplySpanRules(unittest.TestCase):
    def test_nothing(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(apply_span_rules([], lookup_table), [])
        self.assertEqual(resolve_contents('', lookup_table, True), [])
        self.assertEqual(resolve_contents('no delimiters', lookup_table, True), ['no delimiters'])

    def test_no_rules(self):
        lookup_table = make_lookup_table('')
        self.assertEqual(resolve_contents('a *b* c', lookup_table, True), ['a *b* c'])

    def test_nested_spans(self):
        lookup_table = make_lookup_table('s * {} s _ {}')
        self.assertEqual(
            resolve_contents('a *sim_ple_* one line', lookup_table, True),
            ['a ', Span('*', ['sim', Span('_', ['ple'])]), ' one line'],
        )

    def test_longest_opening_first(self):
        lookup_table = make_lookup_table('s * {} s ** {}')
        self.assertEqual(
            resolve_contents('a**bb*c*bb**d', lookup_table, True),
            ['a', Span('**', ['bb', Span('*', ['c']), 'bb']), 'd'],
        )
        self.assertEqual(
            resolve_contents('a***c*bb**d', lookup_table, True),
            ['a', Span('**', [Span('*', ['c']), 'bb']), 'd'],
        )

    def test_leftmost_opening_first(self):
        lookup_table = make_lookup_table('s * {} s _ {}')
        self.assertEqual(
            resolve_contents('_a *b_ c*', lookup_table, True),
            [Span('_', ['a *b']), ' c*'],
        )

    def test_unclosed(self):
        lookup_table = make_lookup_table('s * {} s ** {} s _ {}')
        self.assertEqual(resolve_contents('a*', lookup_table, True), ['a*'])
        self.assertEqual(
            resolve_contents('**hi _there_ world', lookup_table, True),
            ['**hi ', Span('_', ['there']), ' world'],
        )

    def test_no_empty_spans(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(resolve_contents('**', lookup_table, True), ['**'])
        self.assertEqual(resolve_contents('a**b*', lookup_table, True), ['a', Span('*', ['*b'])])

        lookup_table = make_lookup_table('s * {} s ** {}')
        self.assertEqual(resolve_contents('a******b**', lookup_table, True), ['a', Span('**', ['**']), 'b**'])
        self.assertEqual(find_closing(['a*****'], 0, 3, '**'), None)
        self.assertEqual(find_closing(['a******'], 0, 3, '**'), (0, 5))

        lookup_table = make_lookup_table('s ( ) {}')
        self.assertEqual(resolve_contents('()', lookup_table, True), ['()'])
        self.assertEqual(resolve_contents('()x)', lookup_table, True), [Span('(', [')x'])])

    def test_explicit_closing(self):
        lookup_table = make_lookup_table('s <b> </b> {} s << >> {}')
        self.assertEqual(
            resolve_contents('x <b>bold</b> y', lookup_table, True),
            ['x ', Span('<b>', ['bold']), ' y'],
        )
        self.assertEqual(
            resolve_contents('<<a <b>b</b>>>', lookup_table, True),
            [Span('<<', ['a <b>b</b']), '>'],
        )
        self.assertEqual(resolve_contents('a </b> b <b>', lookup_table, True), ['a </b> b <b>'])

    def test_links_styled_internally(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(
            resolve_contents('[https://example.com](*bold*)', lookup_table, True),
            [Link('https://example.com', [Span('*', ['bold'])])],
        )

    def test_links_styled_externally(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(
            resolve_contents('*[https://example.com](here)*', lookup_table, True),
            [Span('*', [Link('https://example.com', ['here'])])],
        )
        self.assertEqual(
            resolve_contents('a *b [u](c) d* e', lookup_table, True),
            ['a ', Span('*', ['b ', Link('u', ['c']), ' d']), ' e'],
        )

    def test_span_not_closed_inside_link(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(
            resolve_contents('a *b [u](c*)', lookup_table, True),
            ['a *b ', Link('u', ['c*'])],
        )

    def test_links_disabled(self):
        lookup_table = make_lookup_table('s * {}')
        self.assertEqual(resolve_contents('[u](c)', lookup_table, False), ['[u](c)'])
        self.assertEqual(
            resolve_contents('[u](*c*)', lookup_table, False),
            ['[u](', Span('*', ['c']), ')'],
        )

    def test_input_left_alone(self):
        lookup_table = make_lookup_table('s * {}')
        fragments = ['a *b ', Link('u', ['c']), ' d*']
        apply_span_rules(fragments, lookup_table)
        self.assertEqual(fragments, ['a *b ', Link('u', ['c']), ' d*'])

    def test_depth_limit(self):
        lookup_table = make_lookup_table('s * {} s _ {}')

        with self.assertWarns(UserWarning):
            contents = apply_span_rules(['a *b _c_* d'], lookup_table, max_depth=1)
        self.assertEqual(contents, ['a ', Span('*', ['b _c_']), ' d'])

        with self.assertWarns(UserWarning):
            contents = apply_span_rules(['a *b* [u](c)'], lookup_table, max_depth=0)
        self.assertEqual(contents, ['a *b* [u](c)'])

        with self.assertWarns(UserWarning):
            contents = apply_span_rules(['x', Link('u', ['*c*'])], lookup_table, max_depth=1)
        self.assertEqual(contents, ['x', Link('u', ['*c*'])])

    def test_depth_limit_not_reached(self):
        lookup_table = make_lookup_table('s * {} s _ {}')

        with warnings.catch_warnings():
            warnings.simplefilter('error')
            contents = apply_span_rules(['a *b _c_* d'], lookup_table, max_depth=3)

        self.assertEqual(contents, ['a ', Span('*', ['b ', Span('_', ['c'])]), ' d'])


if __name__ == '__main__':
    unittest.main()
