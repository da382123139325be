# encoding: utf-8
"""
Best-effort plist writing through Apple's Foundation framework, by way of
PyObjC. Every problem collapses into a NativeWriteOutcome; nothing in here
raises, so callers can always fall back to the XML encoder.
"""

import importlib
import logging

from .types import NativeAvailability, NativeWriteOutcome

LOG = logging.getLogger(__name__)

FRAMEWORK = 'Foundation'
REQUIRED_CLASSES = ('NSData', 'NSPropertyListSerialization')
XML_FORMAT_CONSTANT = 'NSPropertyListXMLFormat_v1_0'


def load_framework():
    '''
    Import the Foundation bridge and return it, or None if it can't be
    loaded. Checked again on every call.
    '''
    try:
        return importlib.import_module(FRAMEWORK)
    except ImportError:
        return None
    except Exception:
        LOG.debug('Loading %s failed', FRAMEWORK, exc_info=True)
        return None


def probe(framework):
    '''Return a NativeAvailability for a loaded framework (or None).'''
    if framework is None:
        return NativeAvailability.FRAMEWORK_MISSING
    for name in REQUIRED_CLASSES:
        if not isinstance(getattr(framework, name, None), type):
            return NativeAvailability.CLASS_MISSING
    if getattr(framework, XML_FORMAT_CONSTANT, None) is None:
        return NativeAvailability.CLASS_MISSING
    return NativeAvailability.AVAILABLE


class NativeStrategy(object):
    """Writes plists with NSPropertyListSerialization."""
    name = 'native'

    def write(self, root_object, path):
        framework = load_framework()
        availability = probe(framework)
        if availability is not NativeAvailability.AVAILABLE:
            LOG.debug('Native plist writer unavailable: %s',
                      availability.value)
            return NativeWriteOutcome.UNAVAILABLE
        try:
            return self.serialize(framework, root_object, str(path))
        except Exception:
            LOG.debug('Native plist writer raised', exc_info=True)
            return NativeWriteOutcome.FAILED

    def serialize(self, framework, root_object, path):
        serialization = framework.NSPropertyListSerialization
        data, error = (
            serialization.dataWithPropertyList_format_options_error_(
                root_object, getattr(framework, XML_FORMAT_CONSTANT), 0, None))
        if data is None:
            LOG.debug('Native serialization failed: %s', error)
            return NativeWriteOutcome.FAILED
        if not data.writeToFile_atomically_(path, True):
            LOG.debug('Native write to %s failed', path)
            return NativeWriteOutcome.FAILED
        return NativeWriteOutcome.SUCCEEDED


def try_write_native(root_object, path):
    '''Write root_object to path natively and return the outcome.'''
    return NativeStrategy().write(root_object, path)
