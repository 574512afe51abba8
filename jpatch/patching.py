# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .errors import (
    OperationError, PathNotFound, InvalidMove, TestFailed, UnknownOperation,
    )
from .log import debug
from .patch_format import PatchOp, validate_patch
from .pointer import (
    resolve, resolve_parent, array_index, format_pointer, is_prefix,
    )
from .value import Kind, kind_of, values_equal, deepcopy_value


__all__ = ["patch", "apply_patch", "apply_operation"]


def _copy_path(node, tokens, edit):
    """Rebuild node with edit applied to the container at tokens.

    Only the containers along tokens are copied, everything else is
    shared with node. Nothing reachable from node is modified, so if
    edit raises, node is still intact. Tokens must already have been
    checked to exist.
    """
    if not tokens:
        return edit(list(node) if kind_of(node) == Kind.ARRAY else dict(node))
    token = tokens[0]
    if kind_of(node) == Kind.ARRAY:
        newnode = list(node)
        index = int(token)
    else:
        newnode = dict(node)
        index = token
    newnode[index] = _copy_path(node[index], tokens[1:], edit)
    return newnode


def _edit_parent(doc, path, edit):
    # Check the parent exists before copying anything
    resolve_parent(doc, path)
    return _copy_path(doc, path[:-1], lambda parent: edit(parent, path[-1]))


def _add(doc, path, value):
    if not path:
        return value

    def edit(parent, token):
        if kind_of(parent) == Kind.ARRAY:
            parent.insert(array_index(parent, token, path, allow_end=True), value)
        else:
            parent[token] = value
        return parent

    return _edit_parent(doc, path, edit)


def _remove(doc, path):
    if not path:
        raise PathNotFound("", "Cannot remove the document root")
    # Raises if the value to remove does not exist
    resolve(doc, path)

    def edit(parent, token):
        if kind_of(parent) == Kind.ARRAY:
            del parent[int(token)]
        else:
            del parent[token]
        return parent

    return _edit_parent(doc, path, edit)


def _replace(doc, path, value):
    if not path:
        return value
    resolve(doc, path)

    def edit(parent, token):
        if kind_of(parent) == Kind.ARRAY:
            parent[int(token)] = value
        else:
            parent[token] = value
        return parent

    return _edit_parent(doc, path, edit)


def _move(doc, from_path, path):
    value = resolve(doc, from_path)
    if is_prefix(from_path, path):
        raise InvalidMove(format_pointer(from_path), format_pointer(path))
    # Both steps build new trees, a failing add leaves doc untouched
    removed = _remove(doc, from_path)
    return _add(removed, path, value)


def _copy(doc, from_path, path):
    value = deepcopy_value(resolve(doc, from_path))
    return _add(doc, path, value)


def _test(doc, path, value):
    actual = resolve(doc, path)
    if not values_equal(actual, value):
        raise TestFailed(format_pointer(path), value, actual)
    return doc


def apply_operation(doc, e):
    """Apply a single patch entry to doc and return the resulting document.

    doc is never modified. The result shares unmodified subtrees with doc,
    values taken from the patch entry are copied.
    """
    op = e.op
    path = e.path
    debug("Applying %s at %s", op, format_pointer(path))
    if op == PatchOp.ADD:
        return _add(doc, path, deepcopy_value(e.value))
    elif op == PatchOp.REMOVE:
        return _remove(doc, path)
    elif op == PatchOp.REPLACE:
        return _replace(doc, path, deepcopy_value(e.value))
    elif op == PatchOp.MOVE:
        return _move(doc, e["from"], path)
    elif op == PatchOp.COPY:
        return _copy(doc, e["from"], path)
    elif op == PatchOp.TEST:
        return _test(doc, path, e.value)
    else:
        raise UnknownOperation(op)


def apply_patch(doc, patch):
    """Produce a patched version of doc with given list of patch entries.

    The entries are applied in order to a copy of doc. The first failing
    entry aborts the whole patch: the raised OperationError gets the
    index and content of that entry, later entries are not applied and
    doc itself is never modified.

    Entries must be PatchEntry objects, as made by decode_patch or the
    op_* constructors, otherwise MalformedPatch is raised before any
    entry is applied.
    """
    validate_patch(patch)
    newdoc = deepcopy_value(doc)
    for index, e in enumerate(patch):
        try:
            newdoc = apply_operation(newdoc, e)
        except OperationError as error:
            error.index = index
            error.operation = e
            debug("Operation %d (%s) failed: %s", index, e.op, error)
            raise
    return newdoc


# Short name used by the package namespace
patch = apply_patch
