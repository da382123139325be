# encoding: utf-8
"""
plisthelper: Read and write .plist files the way Xcode does.

To write a plist use one of:

    write_plist(value, path)
    dump(value, fp)
    dumps(value)

value must be a dictionary, or something that can be turned into one.
Keys become strings, booleans become '1' and '0', and numbers and other
scalars become their string form, so the written plist only ever holds
strings, dictionaries and arrays. Anything that can't be coerced raises
TypeError before a file is touched.

write_plist uses Apple's Foundation framework when PyObjC is installed and
quietly falls back to its own XML encoder when it isn't, or when it fails.
The XML encoder's output matches Xcode's byte for byte: tab indentation,
the Apple DOCTYPE and a trailing newline. Dictionary keys keep their
insertion order.

To read a plist use one of:

    read_plist(path)
    load(fp)
    loads(data)

Both XML plists and old-style ASCII plists (the format of project.pbxproj
files) are accepted. Plists holding integers, reals, dates, data or
booleans are rejected with a TypeError. Binary plists are not supported.


Known issues:
When a dictionary has the same key twice, the last value wins.
"""

import logging

from .about import __packages__, __version__, __author__
from .public import read_plist, write_plist
from .public import dump, dumps, load, loads
from .types import ParseError, PlistNotFoundError
from .types import PlistTypeError, CoercionError

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = ['read_plist', 'write_plist',
           'dump', 'dumps', 'load', 'loads',
           'ParseError', 'PlistNotFoundError',
           'PlistTypeError', 'CoercionError']
