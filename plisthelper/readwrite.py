# encoding: utf-8
'''
This file contains the pure python encoder and parser for plisthelper.
XML plists go through plistlib, old-style ASCII plists through openstep_plist.
'''

import logging
import plistlib
import re
from xml.parsers.expat import ExpatError

import openstep_plist

from .functions import atomic_write, sniff_dialect
from .types import Dialect, ParseError, PlistTypeError

LOG = logging.getLogger(__name__)

# Comments in an old-style plist; anything else counts as content.
_ASCII_COMMENTS = re.compile(r'/\*.*?\*/|//[^\n]*', re.DOTALL)

XML_FORMAT = plistlib.FMT_XML

# Tag names as they would appear in an XML plist, for error messages.
PLIST_TAGS = {
    bool: 'boolean',
    int: 'integer',
    float: 'real',
    bytes: 'data',
}


def encode(root_object):
    '''
    Return root_object as XML plist bytes, formatted the way Xcode writes
    them. Keys keep their insertion order.
    '''
    return plistlib.dumps(root_object, fmt=XML_FORMAT, sort_keys=False)


def decode(data, path=None):
    '''
    Parse data, the bytes of an XML or ASCII plist, and return the root
    dictionary. Raise ParseError if data can't be parsed and PlistTypeError
    if it holds anything besides strings, dictionaries and arrays.
    '''
    dialect = sniff_dialect(data)
    LOG.debug('Parsing %s as an %s plist', path or 'data', dialect.value)
    if dialect is Dialect.BINARY:
        raise ParseError('Binary plists are not supported', path)
    try:
        if dialect is Dialect.XML:
            root_object = plistlib.loads(data, fmt=XML_FORMAT)
        else:
            text = data.decode('utf-8-sig')
            if _ASCII_COMMENTS.sub('', text).strip():
                root_object = openstep_plist.loads(text, use_numbers=False)
            else:
                root_object = None
    except (ExpatError, ValueError, AttributeError,
            openstep_plist.ParseError) as exc:
        raise ParseError('Unable to parse plist: %s' % exc, path) from exc
    if root_object is None:
        raise ParseError('The plist has no root object', path)
    if not isinstance(root_object, dict):
        raise PlistTypeError('The root of a plist must be a dictionary, '
                             'not %s' % plist_tag(root_object))
    check_tree(root_object)
    return root_object


def plist_tag(object_):
    for type_, tag in PLIST_TAGS.items():
        if isinstance(object_, type_):
            return tag
    return type(object_).__name__


def check_tree(object_, key_path=()):
    '''
    Walk a parsed plist and raise PlistTypeError at the first value that
    isn't a string, dictionary or array.
    '''
    if isinstance(object_, str):
        return
    if isinstance(object_, dict):
        for key, value in object_.items():
            check_tree(value, key_path + (key,))
    elif isinstance(object_, list):
        for index, item in enumerate(object_):
            check_tree(item, key_path + (str(index),))
    else:
        raise PlistTypeError(
            'Only strings, dictionaries and arrays are allowed in a plist, '
            'found %s at %s' % (plist_tag(object_), '.'.join(key_path)))


class PureStrategy(object):
    """Writes plists with the XML encoder; works everywhere."""
    name = 'xml'

    def write(self, root_object, path):
        atomic_write(path, encode(root_object))
