# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Applying patches to document files.

Both modes of the jpatch command go through here: one patch applied to
a list of documents, or a batch file pairing glob patterns with patches.
Every document is patched and rendered in memory first and nothing is
written unless all of them succeed.
"""

from collections import namedtuple
import glob

from .documents import read_data, render_document, write_documents
from .errors import (
    MalformedBatch, MalformedPatch, MalformedPointer, OperationError,
    DocumentPatchError,
    )
from .log import debug, info
from .patch_format import decode_patch, encode_patch
from .patching import apply_patch
from .value import Kind, kind_of


BatchEntry = namedtuple("BatchEntry", ["glob", "patch"])

BATCH_FIELDS = ("glob", "jsonPatch")


def decode_batch(data, filename):
    """Decode a parsed batch file into a list of BatchEntry.

    The file must be a list of objects with a string "glob" and a
    list "jsonPatch", and no other members.
    """
    def fail(reason):
        return MalformedBatch("invalid batch file {}: {}".format(filename, reason))

    if kind_of(data) != Kind.ARRAY:
        raise fail("expected a list of {glob, jsonPatch} objects")
    entries = []
    for item in data:
        if kind_of(item) != Kind.OBJECT:
            raise fail("expected an object, not {!r}".format(item))
        for key in item:
            if key not in BATCH_FIELDS:
                raise fail('unknown field "{}"'.format(key))
        for key in BATCH_FIELDS:
            if key not in item:
                raise fail('missing field "{}"'.format(key))
        if not isinstance(item["glob"], str):
            raise fail('field "glob" must be a string')
        if kind_of(item["jsonPatch"]) != Kind.ARRAY:
            raise fail('field "jsonPatch" must be a list of operations')
        try:
            patch = decode_patch(item["jsonPatch"])
        except (MalformedPatch, MalformedPointer) as e:
            raise fail(e) from e
        entries.append(BatchEntry(item["glob"], patch))
    return entries


def patch_documents(patch, paths, indent=2):
    """Apply patch to each document file in paths.

    Returns a list of (path, rendered bytes) pairs in the order of paths.
    The first failing document raises DocumentPatchError.
    """
    rendered = []
    patch_text = None
    for path in paths:
        doc = read_data(path)
        try:
            patched = apply_patch(doc, patch)
        except OperationError as e:
            if patch_text is None:
                patch_text = encode_patch(patch, indent=None).decode("utf-8")
            raise DocumentPatchError(path, patch_text, e) from e
        debug("Patched %s", path)
        rendered.append((path, render_document(path, patched, indent)))
    return rendered


def plan_batch(entries, indent=2):
    """Apply every batch entry to the files its glob matches.

    Files are read fresh for each entry. A file matched by several
    entries appears several times in the result, the last one wins
    when written.
    """
    rendered = []
    for entry in entries:
        matches = sorted(glob.glob(entry.glob))
        info("Pattern %r matched %d file(s)", entry.glob, len(matches))
        rendered.extend(patch_documents(entry.patch, matches, indent))
    return rendered


def apply_batch_file(batch_path, outdir, indent=2):
    "Apply a batch file, writing the results under outdir."
    entries = decode_batch(read_data(batch_path), batch_path)
    rendered = plan_batch(entries, indent)
    write_documents(outdir, rendered)
    return rendered


def apply_patch_file(patch_path, document_paths, outdir, indent=2):
    "Apply a single patch file to the given documents, writing the results under outdir."
    try:
        patch = decode_patch(read_data(patch_path))
    except (MalformedPatch, MalformedPointer) as e:
        raise MalformedPatch("invalid JSON Patch file {}: {}".format(patch_path, e)) from e
    rendered = patch_documents(patch, document_paths, indent)
    write_documents(outdir, rendered)
    return rendered
