# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .errors import (
    JPatchError, MalformedPointer, MalformedPatch, UnknownOperation,
    OperationError, PathNotFound, InvalidArrayIndex, InvalidMove, TestFailed,
)
from .patch_format import decode_patch, encode_patch
from .patching import patch, apply_patch, apply_operation
from .pointer import parse_pointer, format_pointer
from .value import Kind, kind_of, values_equal, loads, encode


__all__ = [
    "__version__",
    "decode_patch", "encode_patch",
    "patch", "apply_patch", "apply_operation",
    "parse_pointer", "format_pointer",
    "Kind", "kind_of", "values_equal", "loads", "encode",
    "JPatchError", "MalformedPointer", "MalformedPatch", "UnknownOperation",
    "OperationError", "PathNotFound", "InvalidArrayIndex", "InvalidMove",
    "TestFailed",
    ]
