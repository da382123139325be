# encoding: utf-8
"""
Coercion of arbitrary python objects into the restricted value model that
plisthelper writes: str, dict (str keys, insertion ordered) and list.

Each accepted category of input has a coercer class. ValueCoercer tries
them in order and hands containers back to itself for their children.
"""

import dataclasses
import enum
import numbers
import re
from collections.abc import Mapping, Sequence

from .types import CoercionError

# Characters XML 1.0 can't carry, plus carriage returns, which plistlib
# rewrites as newlines.
_CONTROL_CHARACTERS = re.compile('[\x00-\x08\x0b-\x1f]')


def describe(key_path):
    if not key_path:
        return 'the root object'
    return "'%s'" % '.'.join(key_path)


class BaseCoercer(object):
    types = ()

    def __init__(self):
        self.value_coercer = None

    def set_value_coercer(self, value_coercer):
        self.value_coercer = value_coercer

    def accepts(self, object_):
        return isinstance(object_, self.types)

    def coerce(self, object_, key_path):
        return object_


class TextCoercer(BaseCoercer):
    types = str

    def coerce(self, text, key_path):
        try:
            text.encode('utf-8')
        except UnicodeEncodeError as exc:
            raise CoercionError('Invalid text at %s: %s'
                                % (describe(key_path), exc)) from exc
        if _CONTROL_CHARACTERS.search(text):
            raise CoercionError('Control characters and carriage returns are '
                                'not allowed in %s' % describe(key_path))
        return str.__str__(text)


class BytesCoercer(TextCoercer):
    types = (bytes, bytearray)

    def coerce(self, data, key_path):
        try:
            text = bytes(data).decode('utf-8')
        except UnicodeDecodeError as exc:
            raise CoercionError('Invalid UTF-8 at %s: %s'
                                % (describe(key_path), exc)) from exc
        return TextCoercer.coerce(self, text, key_path)


class BooleanCoercer(BaseCoercer):
    types = bool

    def coerce(self, boolean, key_path):
        return '1' if boolean else '0'


class MappingCoercer(BaseCoercer):
    types = Mapping

    def accepts(self, object_):
        if isinstance(object_, self.types):
            return True
        return hasattr(object_, 'keys') and hasattr(object_, '__getitem__')

    def coerce(self, mapping, key_path):
        result = {}
        for key in mapping.keys():
            string_key = self.coerce_key(key, key_path)
            child_path = key_path + (string_key,)
            result[string_key] = self.value_coercer.coerce(mapping[key],
                                                           child_path)
        return result

    def coerce_key(self, key, key_path):
        string_key = self.value_coercer.coerce(key, key_path + (repr(key),))
        if not isinstance(string_key, str):
            raise CoercionError('Keys must be strings, not %s (in %s)'
                                % (type(key).__name__, describe(key_path)))
        return string_key


class SequenceCoercer(BaseCoercer):
    types = Sequence

    def coerce(self, sequence, key_path):
        return [self.value_coercer.coerce(item, key_path + (str(index),))
                for index, item in enumerate(sequence)]


class EnumCoercer(BaseCoercer):
    types = enum.Enum

    def coerce(self, member, key_path):
        return self.value_coercer.coerce(member.value, key_path)


class StringableCoercer(BaseCoercer):
    """Numbers, and anything whose class defines its own __str__."""
    types = numbers.Number

    def accepts(self, object_):
        if isinstance(object_, self.types):
            return True
        return type(object_).__str__ is not object.__str__

    def coerce(self, object_, key_path):
        try:
            text = str(object_)
        except Exception as exc:
            raise CoercionError('Converting %s to a string failed: %s'
                                % (describe(key_path), exc)) from exc
        return self.value_coercer.coerce(text, key_path)


class ValueCoercer(object):
    def __init__(self):
        self.mapping_coercer = MappingCoercer()
        # Order matters: enums before str, str before Sequence, bool before
        # Number.
        self.coercers = [EnumCoercer(), TextCoercer(), BytesCoercer(),
                         BooleanCoercer(), self.mapping_coercer,
                         SequenceCoercer(), StringableCoercer()]
        for coercer in self.coercers:
            coercer.set_value_coercer(self)

    def coerce(self, object_, key_path=()):
        if object_ is None:
            raise CoercionError('None is not allowed at %s'
                                % describe(key_path))
        for coercer in self.coercers:
            if coercer.accepts(object_):
                return coercer.coerce(object_, key_path)
        raise CoercionError('Cannot coerce %s at %s to a plist value'
                            % (type(object_).__name__, describe(key_path)))

    def coerce_root(self, object_):
        mapping = self.to_mapping(object_)
        return self.mapping_coercer.coerce(mapping, ())

    def to_mapping(self, object_):
        '''
        Return object_ in a form MappingCoercer accepts, trying the
        conversions python objects commonly offer. Raise CoercionError if
        none of them applies.
        '''
        if self.mapping_coercer.accepts(object_):
            return object_
        if hasattr(object_, '_asdict'):
            convert = object_._asdict
        elif (dataclasses.is_dataclass(object_) and
              not isinstance(object_, type)):
            def convert():
                return dataclasses.asdict(object_)
        elif callable(getattr(object_, 'to_dict', None)):
            convert = object_.to_dict
        else:
            raise CoercionError('Cannot coerce %s to a dictionary'
                                % type(object_).__name__)
        try:
            mapping = convert()
        except Exception as exc:
            raise CoercionError('Converting %s to a dictionary failed: %s'
                                % (type(object_).__name__, exc)) from exc
        if not self.mapping_coercer.accepts(mapping):
            raise CoercionError('%s did not convert to a dictionary'
                                % type(object_).__name__)
        return mapping


_value_coercer = ValueCoercer()


def coerce_value(object_):
    '''Return object_ as a str, dict or list. Raise CoercionError if it
    can't be.'''
    try:
        return _value_coercer.coerce(object_)
    except RecursionError as exc:
        raise CoercionError('Cannot coerce a self-referencing value') from exc


def coerce_root(object_):
    '''Return object_ as a dict fit to be the root of a plist.'''
    try:
        return _value_coercer.coerce_root(object_)
    except RecursionError as exc:
        raise CoercionError('Cannot coerce a self-referencing value') from exc
