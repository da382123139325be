# encoding: utf-8
"""
Exceptions and enums for plisthelper. The exceptions extend the builtin
classes, so callers can keep catching TypeError, ValueError and
FileNotFoundError the way they would with plistlib.
"""

import enum


class ParseError(ValueError):
    """The file exists, but is not a well-formed plist in any dialect."""
    def __init__(self, message, path=None):
        if path is not None:
            message = '%s: %s' % (path, message)
        ValueError.__init__(self, message)
        self.path = path


class PlistNotFoundError(FileNotFoundError, ValueError):
    """The plist to read does not exist."""


class PlistTypeError(TypeError):
    """A parsed plist holds a value other than a string, dict or array."""


class CoercionError(TypeError):
    """A value handed to the writer can't be turned into a plist value."""


class Dialect(enum.Enum):
    XML = 'xml'
    ASCII = 'ascii'
    BINARY = 'binary'


class NativeAvailability(enum.Enum):
    AVAILABLE = 'available'
    FRAMEWORK_MISSING = 'framework missing'
    CLASS_MISSING = 'class missing'


class NativeWriteOutcome(enum.Enum):
    SUCCEEDED = 'succeeded'
    UNAVAILABLE = 'unavailable'
    FAILED = 'failed'
