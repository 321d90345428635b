"""
JSON value model used by the generator.

Numbers keep the literal text they had in the source document, `1e37` stays
`1e37` instead of being reformatted through a float.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Union

from .errors import MalformedJson


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonNumber:
    literal: str


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonArray:
    items: tuple = ()


@dataclass(frozen=True)
class JsonObject:
    members: dict = field(default_factory=dict)


Value = Union[JsonString, JsonNumber, JsonBool, JsonNull, JsonArray, JsonObject]


def kind_name(value) -> str:
    """Human readable kind of a value, used in diagnostics"""
    if isinstance(value, JsonObject):
        return 'Object'
    if isinstance(value, JsonArray):
        return 'Array'
    if isinstance(value, JsonString):
        return f'String({value.value!r})'
    if isinstance(value, JsonNumber):
        return f'Number({value.literal})'
    if isinstance(value, JsonBool):
        return f'Bool({to_json_text(value)})'
    return 'Null'


# region ====== Reading ======
# UTF-16 halves, json accepts them as \uXXXX escapes but they cannot be encoded to UTF-8
_SURROGATE_RE = re.compile('[\ud800-\udfff]')


def _check_text(text):
    match = _SURROGATE_RE.search(text)
    if match is not None:
        raise ValueError(f'lone surrogate \\u{ord(match.group()):04x} in {text!r}')
    return text


def _wrap(native):
    # already converted by the hooks below
    if isinstance(native, (JsonObject, JsonNumber, JsonArray)):
        return native
    if isinstance(native, str):
        return JsonString(_check_text(native))
    if isinstance(native, bool):
        return JsonBool(native)
    if native is None:
        return JsonNull()
    if isinstance(native, list):
        return JsonArray(tuple(_wrap(item) for item in native))
    raise TypeError(f'Unexpected JSON value: {native!r}')


def _object_from_pairs(pairs):
    return JsonObject({_check_text(key): _wrap(value) for key, value in pairs})


def _reject_constant(name):
    raise ValueError(f'{name} is not a valid JSON number')


def parse_json(text) -> Value:
    """Parse JSON text (str or UTF-8 bytes) into a Value tree"""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedJson(e) from e

    try:
        return _wrap(json.loads(
            text,
            object_pairs_hook=_object_from_pairs,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        ))
    except RecursionError as e:
        raise MalformedJson('recursion limit exceeded') from e
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        raise MalformedJson(e) from e

# endregion


# region ====== Writing ======
def to_json_text(value) -> str:
    """Compact JSON text of a value, numbers written back with their literal"""
    if isinstance(value, JsonString):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, JsonNumber):
        return value.literal
    if isinstance(value, JsonBool):
        return 'true' if value.value else 'false'
    if isinstance(value, JsonNull):
        return 'null'
    if isinstance(value, JsonArray):
        return '[' + ','.join(to_json_text(item) for item in value.items) + ']'
    if isinstance(value, JsonObject):
        members = (f'{json.dumps(key, ensure_ascii=False)}:{to_json_text(member)}'
                   for key, member in value.members.items())
        return '{' + ','.join(members) + '}'
    raise TypeError(f'Not a JSON value: {value!r}')

# endregion
