# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The generic JSON value model.

Documents are held as plain Python values: None, bool, int/Decimal, str,
list and dict. All type dispatch in jpatch goes through kind_of, which
keeps booleans apart from numbers and rejects anything that is not JSON.
"""

import copy
import enum
import json
from decimal import Decimal

from .errors import DocumentFormatError


__all__ = ["Kind", "kind_of", "values_equal", "deepcopy_value", "loads", "encode"]


class Kind(enum.Enum):
    "The six kinds of JSON values."
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value):
    """Return the Kind of a JSON value.

    Raises TypeError for Python values that have no JSON counterpart.
    """
    if value is None:
        return Kind.NULL
    # bool is a subclass of int, must be checked first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, list):
        return Kind.ARRAY
    if isinstance(value, dict):
        return Kind.OBJECT
    raise TypeError("Not a JSON value: {!r} of type {}".format(
        value, type(value).__name__))


def values_equal(a, b):
    """Structural equality of two JSON values.

    Object key order is ignored, array order is not. Numbers compare
    by value, so 1, 1.0 and Decimal("1.00") are all equal, while
    True is never equal to 1.
    """
    ka = kind_of(a)
    if ka != kind_of(b):
        return False
    if ka == Kind.ARRAY:
        return len(a) == len(b) and all(
            values_equal(x, y) for x, y in zip(a, b))
    if ka == Kind.OBJECT:
        if set(a) != set(b):
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    if ka == Kind.NUMBER:
        return _as_decimal(a) == _as_decimal(b)
    return a == b


def _as_decimal(n):
    if isinstance(n, float):
        return Decimal(repr(n))
    return Decimal(n)


def deepcopy_value(value):
    "Deep copy a JSON value, sharing nothing with the original."
    return copy.deepcopy(value)


def _reject_constant(name):
    raise ValueError("{} is not valid JSON".format(name))


def loads(data):
    """Decode JSON text into a value.

    Integers are decoded as int and all other numbers as Decimal, so that
    no digits are lost between reading and writing a document.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentFormatError("invalid UTF-8 in JSON text: {}".format(e))
    try:
        return json.loads(data, parse_float=Decimal,
                          parse_constant=_reject_constant)
    except ValueError as e:
        raise DocumentFormatError(str(e))


def _encode_number(n):
    if isinstance(n, int):
        return str(n)
    if isinstance(n, float):
        if n != n or n in (float("inf"), float("-inf")):
            raise ValueError("Out of range float values are not JSON compliant: %r" % n)
        return repr(n)
    if not n.is_finite():
        raise ValueError("Out of range Decimal values are not JSON compliant: %r" % n)
    return str(n)


def _encode_lines(value, indent, level, out):
    kind = kind_of(value)
    if kind == Kind.NULL:
        out.append("null")
    elif kind == Kind.BOOLEAN:
        out.append("true" if value else "false")
    elif kind == Kind.NUMBER:
        out.append(_encode_number(value))
    elif kind == Kind.STRING:
        out.append(json.dumps(value, ensure_ascii=False))
    elif not value:
        out.append("[]" if kind == Kind.ARRAY else "{}")
    else:
        if kind == Kind.ARRAY:
            opener, closer = "[", "]"
            items = [(None, v) for v in value]
        else:
            opener, closer = "{", "}"
            items = list(value.items())
        if indent is None:
            inner = separator = ""
            item_sep, key_sep = ",", ":"
        else:
            inner = "\n" + " " * (indent * (level + 1))
            separator = "\n" + " " * (indent * level)
            item_sep, key_sep = ",", ": "
        out.append(opener)
        for i, (key, v) in enumerate(items):
            if i:
                out.append(item_sep)
            out.append(inner)
            if key is not None:
                if not isinstance(key, str):
                    raise TypeError("Object keys must be strings, not {!r}".format(key))
                out.append(json.dumps(key, ensure_ascii=False))
                out.append(key_sep)
            _encode_lines(v, indent, level + 1, out)
        out.append(separator)
        out.append(closer)


def encode_text(value, indent=2):
    "Serialize a value to JSON text. See encode."
    out = []
    _encode_lines(value, indent, 0, out)
    return "".join(out)


def encode(value, indent=2):
    """Serialize a value to canonical UTF-8 JSON bytes.

    Object keys are written in insertion order. Numbers are written from
    their exact int/Decimal form. With indent=None the output is compact
    and on a single line.
    """
    return encode_text(value, indent).encode("utf-8")
