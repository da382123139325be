#!/usr/bin/env python
# encoding: utf-8
"""Tests for the pure python encoder and the XML/ASCII parser."""

import unittest

from plisthelper import readwrite
from plisthelper.functions import sniff_dialect
from plisthelper.types import Dialect, ParseError, PlistTypeError

from helpers import read_fixture

HEADER = (b'<?xml version="1.0" encoding="UTF-8"?>\n'
          b'<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
          b'"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n')


def xml_plist(body):
    return HEADER + b'<plist version="1.0">\n' + body + b'\n</plist>\n'


class EncoderTests(unittest.TestCase):

    def test_nested_values_are_indented_with_tabs(self):
        result = readwrite.encode({'a': {'b': ['c']}})
        self.assertEqual(result, xml_plist(
            b'<dict>\n'
            b'\t<key>a</key>\n'
            b'\t<dict>\n'
            b'\t\t<key>b</key>\n'
            b'\t\t<array>\n'
            b'\t\t\t<string>c</string>\n'
            b'\t\t</array>\n'
            b'\t</dict>\n'
            b'</dict>'))

    def test_empty_containers(self):
        result = readwrite.encode({'d': {}, 'a': [], 's': ''})
        self.assertIn(b'\t<dict/>\n', result)
        self.assertIn(b'\t<array/>\n', result)
        self.assertIn(b'\t<string></string>\n', result)
        self.assertEqual(readwrite.encode({}),
                         xml_plist(b'<dict/>'))

    def test_markup_is_escaped(self):
        result = readwrite.encode({'a & b': '<c> & "d"'})
        self.assertIn(b'<key>a &amp; b</key>', result)
        self.assertIn(b'<string>&lt;c&gt; &amp; "d"</string>', result)

    def test_unicode_is_utf8_encoded(self):
        result = readwrite.encode({'emoji': '\U0001F600 café'})
        self.assertIn('<string>\U0001F600 café</string>'.encode('utf-8'),
                      result)

    def test_keys_are_not_sorted(self):
        result = readwrite.encode({'b': '1', 'a': '2'})
        self.assertLess(result.index(b'<key>b</key>'),
                        result.index(b'<key>a</key>'))


class XMLParserTests(unittest.TestCase):

    def test_reads_strings_dicts_and_arrays(self):
        data = xml_plist(b'<dict><key>a</key><array><string>b</string>'
                         b'<dict/></array><key>c</key><string/></dict>')
        self.assertEqual(readwrite.decode(data), {'a': ['b', {}], 'c': ''})

    def test_unescapes_entities(self):
        data = xml_plist(b'<dict><key>k</key>'
                         b'<string>&lt;group&gt; &amp; &#x1F600;</string>'
                         b'</dict>')
        self.assertEqual(readwrite.decode(data),
                         {'k': '<group> & \U0001F600'})

    def test_last_duplicate_key_wins(self):
        data = xml_plist(b'<dict><key>a</key><string>first</string>'
                         b'<key>a</key><string>last</string></dict>')
        self.assertEqual(readwrite.decode(data), {'a': 'last'})

    def test_rejects_other_plist_types(self):
        for body in (b'<integer>42</integer>', b'<real>4.2</real>',
                     b'<true/>', b'<false/>', b'<data>AAAA</data>',
                     b'<date>2014-01-01T00:00:00Z</date>'):
            data = xml_plist(b'<dict><key>k</key>' + body + b'</dict>')
            with self.assertRaises(PlistTypeError):
                readwrite.decode(data)

    def test_reports_where_the_bad_value_is(self):
        data = xml_plist(b'<dict><key>outer</key><array><string>x</string>'
                         b'<integer>1</integer></array></dict>')
        with self.assertRaises(PlistTypeError) as context:
            readwrite.decode(data)
        self.assertIn('outer.1', str(context.exception))
        self.assertIn('integer', str(context.exception))

    def test_root_must_be_a_dictionary(self):
        with self.assertRaises(PlistTypeError):
            readwrite.decode(xml_plist(b'<array/>'))

    def test_unterminated_markup_is_a_parse_error(self):
        data = HEADER + b'<plist version="1.0">\n<dict>\n<key>a</key>'
        with self.assertRaises(ParseError) as context:
            readwrite.decode(data, 'broken.plist')
        self.assertEqual(context.exception.path, 'broken.plist')
        self.assertIn('broken.plist', str(context.exception))

    def test_empty_plist_is_a_parse_error(self):
        with self.assertRaises(ParseError):
            readwrite.decode(HEADER + b'<plist version="1.0"></plist>')

    def test_malformed_date_is_a_parse_error(self):
        data = xml_plist(b'<dict><key>d</key><date>garbage</date></dict>')
        with self.assertRaises(ParseError):
            readwrite.decode(data, 'dates.plist')


class ASCIIParserTests(unittest.TestCase):

    def test_reads_a_project_file(self):
        result = readwrite.decode(read_fixture('Cocoa Application.pbxproj'))
        self.assertEqual(result['archiveVersion'], '1')
        self.assertEqual(result['classes'], {})
        self.assertEqual(result['rootObject'], 'E5E5D3A11A2B3C4D00000005')
        objects = result['objects']
        group = objects['E5E5D3A11A2B3C4D00000004']
        self.assertEqual(group['children'], ['E5E5D3A11A2B3C4D00000002',
                                             'E5E5D3A11A2B3C4D00000003'])
        self.assertEqual(group['name'], 'Café "Bleu"')
        self.assertEqual(group['sourceTree'], '<group>')
        project = objects['E5E5D3A11A2B3C4D00000005']
        self.assertEqual(project['attributes'], {'LastUpgradeCheck': '0610'})
        self.assertEqual(project['targets'], [])

    def test_numbers_stay_strings(self):
        self.assertEqual(readwrite.decode(b'{ a = 1; b = 2.5; }'),
                         {'a': '1', 'b': '2.5'})

    def test_last_duplicate_key_wins(self):
        self.assertEqual(readwrite.decode(b'{ a = first; a = last; }'),
                         {'a': 'last'})

    def test_rejects_data(self):
        with self.assertRaises(PlistTypeError):
            readwrite.decode(b'{ a = <0fbd7788>; }')

    def test_unterminated_dictionary_is_a_parse_error(self):
        with self.assertRaises(ParseError):
            readwrite.decode(b'{ a = b; ')

    def test_root_must_be_a_dictionary(self):
        with self.assertRaises(PlistTypeError):
            readwrite.decode(b'( a, b )')

    def test_empty_input_is_a_parse_error(self):
        for data in (b'', b'   \n', b'\xef\xbb\xbf'):
            with self.assertRaises(ParseError):
                readwrite.decode(data, 'empty.pbxproj')

    def test_comments_alone_are_a_parse_error(self):
        for data in (b'// !$*UTF8*$!\n', b'/* nothing here */\n'):
            with self.assertRaises(ParseError) as context:
                readwrite.decode(data, 'project.pbxproj')
            self.assertIn('no root object', str(context.exception))


class DialectTests(unittest.TestCase):

    def test_sniffs_xml(self):
        self.assertIs(sniff_dialect(HEADER), Dialect.XML)
        self.assertIs(sniff_dialect(b'\xef\xbb\xbf\n  <plist/>'), Dialect.XML)

    def test_sniffs_ascii(self):
        self.assertIs(sniff_dialect(b'// !$*UTF8*$!\n{}'), Dialect.ASCII)
        self.assertIs(sniff_dialect(b'{ a = b; }'), Dialect.ASCII)

    def test_binary_plists_are_rejected(self):
        self.assertIs(sniff_dialect(b'bplist00\xd0\x08'), Dialect.BINARY)
        with self.assertRaises(ParseError):
            readwrite.decode(b'bplist00\xd0\x08')


if __name__ == '__main__':
    unittest.main()
