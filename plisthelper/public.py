# encoding: utf-8
"""This file contains the public functions for the module plisthelper."""

import errno
import logging

from .coercion import coerce_root
from .functions import coerce_path
from .native import NativeStrategy
from .readwrite import PureStrategy, decode, encode
from .types import NativeWriteOutcome, PlistNotFoundError

LOG = logging.getLogger(__name__)


#########
## API ##
#########

# read_plist(path)
# write_plist(value, path, use_native=True)
# load(fp)
# loads(data)
# dump(value, fp)
# dumps(value)

def write_plist(value, path, use_native=True):
    """
    Write value, which must be coercible to a dictionary, to path as a plist.

    The native Foundation writer is tried first unless use_native is False.
    If it is missing or fails, the XML encoder writes the file instead; the
    caller can't tell the difference when reading it back. Raise TypeError
    if path or value can't be coerced, before anything is written.
    """
    path = coerce_path(path)
    root_object = coerce_root(value)
    if use_native:
        outcome = NativeStrategy().write(root_object, path)
        if outcome is NativeWriteOutcome.SUCCEEDED:
            LOG.debug('Wrote %s natively', path)
            return
        LOG.debug('Falling back to the XML encoder for %s (native: %s)',
                  path, outcome.value)
    PureStrategy().write(root_object, path)


def read_plist(path):
    """
    Read the XML or ASCII plist at path and return its root dictionary.
    Raise PlistNotFoundError if there is no file at path, ParseError if it
    isn't a plist and PlistTypeError if it holds values other than strings,
    dictionaries and arrays.
    """
    path = coerce_path(path)
    if not path.exists():
        raise PlistNotFoundError(errno.ENOENT, 'No such plist', str(path))
    return decode(path.read_bytes(), path)


def dump(value, fp):
    '''Write value as an XML plist to fp, a binary file object.'''
    fp.write(dumps(value))


def dumps(value):
    '''Return value as XML plist bytes.'''
    return encode(coerce_root(value))


def load(fp):
    '''Read a plist from fp, a binary file object.'''
    return loads(fp.read())


def loads(data):
    '''Return the root dictionary of the plist in data (bytes or str).'''
    if isinstance(data, str):
        data = data.encode('utf-8')
    return decode(data)
