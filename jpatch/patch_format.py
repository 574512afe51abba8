# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import MalformedPatch, UnknownOperation
from .pointer import parse_pointer, format_pointer
from .value import Kind, kind_of, loads, encode, deepcopy_value


class PatchEntry(dict):
    """For internal usage in jpatch library.

    Minimal class providing attribute access to patch entry keys.
    Note that the "from" key of move and copy entries is a keyword,
    so it has to be read as entry["from"].
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Fields required by each op, besides "op" and "path"
OP_FIELDS = {
    PatchOp.ADD: ("value",),
    PatchOp.REMOVE: (),
    PatchOp.REPLACE: ("value",),
    PatchOp.MOVE: ("from",),
    PatchOp.COPY: ("from",),
    PatchOp.TEST: ("value",),
}


def _pointer(path):
    if isinstance(path, str):
        return parse_pointer(path)
    return tuple(path)


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=_pointer(path), value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=_pointer(path))

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=_pointer(path), value=value)

def op_move(from_path, path):
    "Create a patch entry to move the value at from_path to path."
    return PatchEntry({"op": PatchOp.MOVE, "from": _pointer(from_path), "path": _pointer(path)})

def op_copy(from_path, path):
    "Create a patch entry to copy the value at from_path to path."
    return PatchEntry({"op": PatchOp.COPY, "from": _pointer(from_path), "path": _pointer(path)})

def op_test(path, value):
    "Create a patch entry to check that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=_pointer(path), value=value)


def decode_entry(e):
    """Convert one parsed JSON object into a PatchEntry.

    Members other than the ones the op needs are ignored.
    """
    if kind_of(e) != Kind.OBJECT:
        raise MalformedPatch("Patch operation must be an object, not {!r}".format(e))
    if "op" not in e:
        raise MalformedPatch("Patch operation {!r} is missing the 'op' member".format(e))
    op = e["op"]
    if not isinstance(op, str):
        raise MalformedPatch("Patch operation 'op' must be a string, not {!r}".format(op))
    if op not in OP_FIELDS:
        raise UnknownOperation(op)
    entry = PatchEntry(op=op)
    for field in ("path",) + OP_FIELDS[op]:
        if field not in e:
            raise MalformedPatch(
                "Patch operation {!r} is missing the '{}' member".format(e, field))
        if field in ("path", "from"):
            if not isinstance(e[field], str):
                raise MalformedPatch(
                    "Patch operation '{}' must be a string, not {!r}".format(field, e[field]))
            entry[field] = parse_pointer(e[field])
        else:
            entry[field] = e[field]
    return entry


def decode_patch(data):
    """Decode an RFC 6902 JSON Patch.

    data can be JSON text (str or bytes) or an already parsed list.
    Returns a list of PatchEntry objects with pointers parsed.
    """
    if isinstance(data, (str, bytes)):
        try:
            data = loads(data)
        except ValueError as e:
            raise MalformedPatch("Invalid JSON Patch document: {}".format(e))
    if not isinstance(data, list):
        raise MalformedPatch("JSON Patch must be a list of operations")
    return [decode_entry(e) for e in data]


def to_json_entry(entry):
    "Convert a PatchEntry to a plain dict with string pointers."
    d = {"op": entry.op, "path": format_pointer(entry.path)}
    if "from" in entry:
        d["from"] = format_pointer(entry["from"])
    if "value" in entry:
        d["value"] = deepcopy_value(entry.value)
    return d


def encode_patch(patch, indent=2):
    "Serialize a list of patch entries as RFC 6902 JSON bytes."
    return encode([to_json_entry(e) for e in patch], indent=indent)


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a MalformedPatch if not well formed.
    """
    if not isinstance(patch, list):
        raise MalformedPatch("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a MalformedPatch if not well formed.
    """
    if not isinstance(e, PatchEntry):
        raise MalformedPatch("Patch entry '{}' is not a patch type.".format(e))
    if "op" not in e:
        raise MalformedPatch("Patch entry '{}' has no op.".format(e))
    if e.op not in OP_FIELDS:
        raise UnknownOperation(e.op)
    for field in ("path",) + OP_FIELDS[e.op]:
        if field not in e:
            raise MalformedPatch(
                "Patch entry '{}' has no '{}' member.".format(e, field))
    for field in ("path", "from"):
        if field in e and not (
                isinstance(e[field], tuple) and all(isinstance(t, str) for t in e[field])):
            raise MalformedPatch(
                "Patch entry '{}' must be a tuple of reference tokens, not '{}'.".format(
                    field, e[field]))


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except MalformedPatch:
        return False
    return True
