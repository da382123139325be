# encoding: utf-8
'''This file contains private functions for the plisthelper module.'''

import codecs
import logging
import os
import shutil
import tempfile
from pathlib import Path

from .types import Dialect

LOG = logging.getLogger(__name__)

BINARY_MAGIC = b'bplist00'


def coerce_path(path_like):
    '''
    Return path_like as a pathlib.Path. Anything implementing the os.PathLike
    protocol is accepted, as are str and bytes. Raise TypeError otherwise.
    '''
    try:
        path = os.fspath(path_like)
    except TypeError:
        raise TypeError('Cannot coerce %s to a path'
                        % type(path_like).__name__) from None
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    return Path(path)


def sniff_dialect(data):
    '''Guess the dialect of the plist held in data, a bytes object.'''
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    data = data.lstrip()
    if data.startswith(BINARY_MAGIC):
        return Dialect.BINARY
    if data.startswith(b'<'):
        return Dialect.XML
    return Dialect.ASCII


def default_mode():
    '''Return the mode a newly created file gets under the current umask.'''
    # Reading the umask means setting it; only safe while single threaded.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(path, data):
    '''
    Write data to path through a temporary file in the same directory, which
    is then renamed over path. Readers of path see either the old content or
    the new one, never a partial write.
    '''
    path = Path(path)
    directory = path.absolute().parent
    fd, temp_name = tempfile.mkstemp(prefix='.%s.' % path.name,
                                     suffix='.tmp', dir=str(directory))
    try:
        with os.fdopen(fd, 'wb') as file_object:
            file_object.write(data)
            file_object.flush()
            os.fsync(file_object.fileno())
        if path.exists():
            shutil.copymode(str(path), temp_name)
        else:
            os.chmod(temp_name, default_mode())
        os.replace(temp_name, str(path))
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise
    LOG.debug('Wrote %d bytes to %s', len(data), path)
