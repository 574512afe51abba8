# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) parsing and navigation.

A pointer is held as a tuple of unescaped reference tokens, the empty
tuple being the whole document. Tokens stay strings: whether a token is
an object key or an array index is only known once it meets a container.
"""

import re

from .errors import MalformedPointer, PathNotFound, InvalidArrayIndex
from .value import Kind, kind_of


__all__ = [
    "parse_pointer", "format_pointer", "escape_token", "unescape_token",
    "resolve", "resolve_parent", "array_index", "is_prefix",
    ]


END_OF_ARRAY = "-"

_r_index = re.compile(r"\A(0|[1-9][0-9]*)\Z")
_r_bad_escape = re.compile(r"~(?![01])")


def unescape_token(token):
    "Decode ~1 and ~0 escapes, in that order."
    return token.replace("~1", "/").replace("~0", "~")


def escape_token(token):
    return token.replace("~", "~0").replace("/", "~1")


def parse_pointer(text):
    """Parse a JSON Pointer string into a tuple of reference tokens.

    Raises MalformedPointer if text is not empty and does not start
    with '/', or contains a '~' that is not part of an escape.
    """
    if not isinstance(text, str):
        raise MalformedPointer(text, "pointer must be a string")
    if text == "":
        return ()
    if not text.startswith("/"):
        raise MalformedPointer(text, "must be empty or start with '/'")
    if _r_bad_escape.search(text):
        raise MalformedPointer(text, "'~' must be followed by '0' or '1'")
    return tuple(unescape_token(t) for t in text[1:].split("/"))


def format_pointer(tokens):
    "Join reference tokens into a JSON Pointer string."
    return "".join("/" + escape_token(str(t)) for t in tokens)


def is_prefix(parent, child):
    "Whether pointer parent equals or is an ancestor of pointer child."
    return len(parent) <= len(child) and tuple(child[:len(parent)]) == tuple(parent)


def array_index(array, token, tokens, allow_end=False):
    """Convert token to an index into array.

    With allow_end, the index may also be len(array), written either as
    a number or as '-', which is how insertion positions are addressed.
    Otherwise the index must refer to an existing element.
    tokens is the full pointer, used for error messages.

    Tokens that are not array indices ('-' when reading, signs, leading
    zeros, anything but digits) raise InvalidArrayIndex. A well formed
    index past the end raises PathNotFound when reading, as a missing
    object key does, and InvalidArrayIndex when inserting.
    """
    n = len(array)
    if token == END_OF_ARRAY:
        if allow_end:
            return n
        raise InvalidArrayIndex(
            format_pointer(tokens), token,
            "Array end token '-' cannot be used to refer to an element in {}".format(
                format_pointer(tokens)))
    if not _r_index.match(token):
        raise InvalidArrayIndex(format_pointer(tokens), token)
    index = int(token)
    if allow_end:
        if index > n:
            raise InvalidArrayIndex(
                format_pointer(tokens), token,
                "Index {} is out of bounds for insertion into array of length {} at {}".format(
                    index, n, format_pointer(tokens)))
    elif index >= n:
        raise PathNotFound(
            format_pointer(tokens),
            "Index {} is out of bounds for array of length {} at {}".format(
                index, n, format_pointer(tokens)))
    return index


def _step(current, token, tokens, depth):
    kind = kind_of(current)
    if kind == Kind.OBJECT:
        try:
            return current[token]
        except KeyError:
            raise PathNotFound(format_pointer(tokens[:depth + 1]))
    elif kind == Kind.ARRAY:
        return current[array_index(current, token, tokens[:depth + 1])]
    else:
        raise PathNotFound(
            format_pointer(tokens[:depth + 1]),
            "Cannot index into {} value at {}".format(
                kind.value, format_pointer(tokens[:depth]) or "document root"))


def resolve(value, tokens):
    """Return the value at pointer tokens.

    Every token must name an existing object member or array element.
    """
    current = value
    for depth, token in enumerate(tokens):
        current = _step(current, token, tokens, depth)
    return current


def resolve_parent(value, tokens):
    """Return (parent, last_token) for a non-root pointer.

    The parent must exist and be an array or an object.
    """
    assert tokens, 'the document root has no parent'
    parent = resolve(value, tokens[:-1])
    if kind_of(parent) not in (Kind.ARRAY, Kind.OBJECT):
        raise PathNotFound(
            format_pointer(tokens),
            "Cannot index into {} value at {}".format(
                kind_of(parent).value, format_pointer(tokens[:-1]) or "document root"))
    return parent, tokens[-1]
