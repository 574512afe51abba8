# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class JPatchError(Exception):
    "Base class of all errors raised by jpatch."


class MalformedPointer(JPatchError, ValueError):
    "A JSON Pointer string does not follow RFC 6901 syntax."

    def __init__(self, pointer, reason):
        self.pointer = pointer
        self.reason = reason
        super(MalformedPointer, self).__init__(
            "Invalid JSON Pointer {!r}: {}".format(pointer, reason))


class MalformedPatch(JPatchError, ValueError):
    "A patch document is not a well formed list of RFC 6902 operations."


class UnknownOperation(MalformedPatch):
    "A patch operation has an op other than the six RFC 6902 ones."

    def __init__(self, op):
        self.op = op
        super(UnknownOperation, self).__init__(
            "Unexpected kind: {}".format(op))


class OperationError(JPatchError):
    """An operation could not be applied to a document.

    The patch runner sets `index` and `operation` to the position and
    content of the failing operation before re-raising.
    """
    index = None
    operation = None


class PathNotFound(OperationError, LookupError):

    def __init__(self, pointer, message=None):
        self.pointer = pointer
        super(PathNotFound, self).__init__(
            message or "Path {} does not exist".format(pointer))


class InvalidArrayIndex(OperationError, LookupError):

    def __init__(self, pointer, token, message=None):
        self.pointer = pointer
        self.token = token
        super(InvalidArrayIndex, self).__init__(
            message or "Invalid array index {!r} in {}".format(token, pointer))


class InvalidMove(OperationError):

    def __init__(self, from_pointer, pointer):
        self.from_pointer = from_pointer
        self.pointer = pointer
        super(InvalidMove, self).__init__(
            "Cannot move {} into {}".format(from_pointer, pointer))


class TestFailed(OperationError, AssertionError):
    "A test operation found a value different from the expected one."

    # Not a test case, keep pytest from collecting it
    __test__ = False

    def __init__(self, pointer, expected, actual):
        self.pointer = pointer
        self.expected = expected
        self.actual = actual
        super(TestFailed, self).__init__(
            "Testing value {} failed".format(pointer))


class DocumentPatchError(JPatchError):
    """Applying a patch to one document file failed.

    `error` is the OperationError raised by the patch runner.
    """

    def __init__(self, document, patch_text, error):
        self.document = document
        self.patch_text = patch_text
        self.error = error
        super(DocumentPatchError, self).__init__(
            "error applying JSON Patch {} to {}: {}".format(patch_text, document, error))


class DocumentFormatError(JPatchError, ValueError):
    "A document file could not be decoded into a JSON value."


class MalformedBatch(JPatchError, ValueError):
    "A batch file is not a list of {glob, jsonPatch} entries."
