# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jpatch import decode_patch, patch
from jpatch.errors import MalformedPointer, PathNotFound, InvalidArrayIndex
from jpatch.pointer import (
    parse_pointer, format_pointer, escape_token, unescape_token,
    resolve, resolve_parent, array_index, is_prefix,
    )


# Examples from RFC 6901 section 5
rfc_document = {
    "foo": ["bar", "baz"],
    "": 0,
    "a/b": 1,
    "c%d": 2,
    "e^f": 3,
    "g|h": 4,
    "i\\j": 5,
    "k\"l": 6,
    " ": 7,
    "m~n": 8,
}


def test_parse_pointer():
    assert parse_pointer("") == ()
    assert parse_pointer("/") == ("",)
    assert parse_pointer("/foo") == ("foo",)
    assert parse_pointer("/foo/0") == ("foo", "0")
    assert parse_pointer("/a~1b") == ("a/b",)
    assert parse_pointer("/m~0n") == ("m~n",)
    # ~01 is ~ followed by 1, not /
    assert parse_pointer("/~01") == ("~1",)
    assert parse_pointer("//x/") == ("", "x", "")


def test_parse_pointer_malformed():
    with pytest.raises(MalformedPointer):
        parse_pointer("foo")
    with pytest.raises(MalformedPointer):
        parse_pointer("#/foo")
    with pytest.raises(MalformedPointer):
        parse_pointer("/a~2b")
    with pytest.raises(MalformedPointer):
        parse_pointer("/a~")
    with pytest.raises(MalformedPointer):
        parse_pointer(None)
    with pytest.raises(MalformedPointer):
        parse_pointer(["a"])


def test_escape_roundtrip():
    for token in ("", "a/b", "m~n", "~1", "/~", "plain"):
        assert unescape_token(escape_token(token)) == token
        assert parse_pointer(format_pointer([token])) == (token,)
    assert format_pointer(()) == ""
    assert format_pointer(("a/b", "m~n", "0")) == "/a~1b/m~0n/0"


def test_resolve_rfc_examples():
    assert resolve(rfc_document, parse_pointer("")) is rfc_document
    assert resolve(rfc_document, parse_pointer("/foo")) == ["bar", "baz"]
    assert resolve(rfc_document, parse_pointer("/foo/0")) == "bar"
    assert resolve(rfc_document, parse_pointer("/")) == 0
    assert resolve(rfc_document, parse_pointer("/a~1b")) == 1
    assert resolve(rfc_document, parse_pointer("/c%d")) == 2
    assert resolve(rfc_document, parse_pointer("/e^f")) == 3
    assert resolve(rfc_document, parse_pointer("/g|h")) == 4
    assert resolve(rfc_document, parse_pointer("/i\\j")) == 5
    assert resolve(rfc_document, parse_pointer("/k\"l")) == 6
    assert resolve(rfc_document, parse_pointer("/ ")) == 7
    assert resolve(rfc_document, parse_pointer("/m~0n")) == 8


def test_resolve_missing():
    with pytest.raises(PathNotFound):
        resolve(rfc_document, parse_pointer("/nope"))
    with pytest.raises(PathNotFound):
        resolve(rfc_document, parse_pointer("/nope/deeper"))
    with pytest.raises(PathNotFound):
        resolve(rfc_document, parse_pointer("/foo/2"))


def test_resolve_through_scalar_fails():
    doc = {"s": "text", "n": None, "i": 1}
    for pointer in ("/s/0", "/n/x", "/i/0", "/s/length"):
        with pytest.raises(PathNotFound):
            resolve(doc, parse_pointer(pointer))


def test_resolve_array_tokens():
    doc = {"a": [10, 20, 30]}
    assert resolve(doc, ("a", "2")) == 30
    for token in ("-", "-1", "01", "+1", "1.0", "x", ""):
        with pytest.raises(InvalidArrayIndex):
            resolve(doc, ("a", token))


def test_array_index():
    arr = [1, 2, 3]
    assert array_index(arr, "0", ("0",)) == 0
    assert array_index(arr, "2", ("2",)) == 2
    with pytest.raises(PathNotFound):
        array_index(arr, "3", ("3",))
    with pytest.raises(InvalidArrayIndex):
        array_index(arr, "-", ("-",))

    # Insertion positions include one past the end
    assert array_index(arr, "3", ("3",), allow_end=True) == 3
    assert array_index(arr, "-", ("-",), allow_end=True) == 3
    assert array_index([], "0", ("0",), allow_end=True) == 0
    with pytest.raises(InvalidArrayIndex):
        array_index(arr, "4", ("4",), allow_end=True)
    with pytest.raises(InvalidArrayIndex):
        array_index(arr, "-1", ("-1",), allow_end=True)

    # int() would accept surrounding whitespace
    for token in ("1\n", " 1", "1 ", "\n"):
        with pytest.raises(InvalidArrayIndex):
            array_index(arr, token, (token,))
        with pytest.raises(InvalidArrayIndex):
            array_index(arr, token, (token,), allow_end=True)


def test_patch_rejects_index_with_newline():
    ops = decode_patch(b'[{"op": "replace", "path": "/1\\n", "value": 9}]')
    with pytest.raises(InvalidArrayIndex):
        patch([1, 2, 3], ops)


def test_resolve_parent():
    doc = {"a": {"b": [1, 2]}}
    parent, token = resolve_parent(doc, ("a", "b", "5"))
    assert parent == [1, 2]
    assert token == "5"
    parent, token = resolve_parent(doc, ("new",))
    assert parent is doc
    assert token == "new"
    with pytest.raises(PathNotFound):
        resolve_parent(doc, ("x", "y"))
    with pytest.raises(PathNotFound):
        resolve_parent(doc, ("a", "b", "0", "x"))


def test_is_prefix():
    assert is_prefix((), ("a",))
    assert is_prefix(("a",), ("a",))
    assert is_prefix(("a",), ("a", "b"))
    assert not is_prefix(("a", "b"), ("a",))
    assert not is_prefix(("a",), ("ab",))
    assert not is_prefix(("a", "b"), ("a", "c"))
