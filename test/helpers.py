# encoding: utf-8
"""Shared fixtures for the plisthelper test suite."""

import os
import shutil
import tempfile
import unittest
from unittest import mock

FIXTURES = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'fixtures')


def fixture_path(name):
    return os.path.join(FIXTURES, name)


def read_fixture(name):
    with open(fixture_path(name), 'rb') as fixture:
        return fixture.read()


def without_native():
    '''Patch the native framework loader so nothing native is found.'''
    return mock.patch('plisthelper.native.load_framework', return_value=None)


class TemporaryDirectoryTestCase(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.directory)
        self.plist = os.path.join(self.directory, 'plist')

    def read_bytes(self, path=None):
        with open(path or self.plist, 'rb') as plist:
            return plist.read()

    def write_bytes(self, data, path=None):
        with open(path or self.plist, 'wb') as plist:
            plist.write(data)
