# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Reading and writing JSON and YAML document files.

YAML files are converted to the same values the JSON decoder produces
before they reach the patch engine, and converted back when written.
"""

import datetime
import io
import os
from decimal import Decimal

import yaml

from .errors import DocumentFormatError
from .log import debug
from .utils import ensure_dir_exists, mirrored_path
from .value import kind_of, loads, encode_text


YAML_EXTENSIONS = (".yaml", ".yml")


def is_yaml_path(path):
    "Whether a file is treated as YAML, judged by its extension."
    return os.path.splitext(path)[1] in YAML_EXTENSIONS


def from_yaml(obj):
    """Convert a value loaded by PyYAML into a JSON value.

    Mapping keys must be strings. Floats become Decimal and dates
    become ISO 8601 strings.
    """
    if isinstance(obj, dict):
        converted = {}
        for k, v in obj.items():
            if not isinstance(k, str):
                raise DocumentFormatError(
                    "non-string key {!r} with value {!r}".format(k, v))
            converted[k] = from_yaml(v)
        return converted
    elif isinstance(obj, list):
        return [from_yaml(v) for v in obj]
    elif isinstance(obj, float):
        if obj != obj or obj in (float("inf"), float("-inf")):
            raise DocumentFormatError("{!r} cannot be represented in JSON".format(obj))
        return Decimal(repr(obj))
    elif isinstance(obj, (datetime.date, datetime.datetime)):
        return obj.isoformat()
    elif obj is None or isinstance(obj, (bool, int, str)):
        return obj
    raise DocumentFormatError(
        "YAML value {!r} of type {} cannot be represented in JSON".format(
            obj, type(obj).__name__))


class _Dumper(yaml.SafeDumper):

    def ignore_aliases(self, data):
        return True


def _represent_decimal(dumper, value):
    # Only integer literals have a zero exponent, all others stay floats
    if value.as_tuple().exponent == 0:
        return dumper.represent_int(int(value))
    mantissa, e, exponent = str(value).lower().partition("e")
    # YAML 1.1 floats need a point in the mantissa
    if "." not in mantissa:
        mantissa += ".0"
    return dumper.represent_scalar("tag:yaml.org,2002:float", mantissa + e + exponent)


_Dumper.add_representer(Decimal, _represent_decimal)


def load_yaml(data):
    try:
        obj = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DocumentFormatError(str(e))
    return from_yaml(obj)


def dump_yaml(value):
    # Values are checked up front, PyYAML would happily dump anything
    kind_of(value)
    return yaml.dump(value, Dumper=_Dumper, default_flow_style=False,
                     sort_keys=False, allow_unicode=True)


def read_data(path):
    """Read a JSON or YAML file and return its content as a JSON value."""
    debug("Reading %s", path)
    with io.open(path, "rb") as f:
        data = f.read()
    try:
        if is_yaml_path(path):
            return load_yaml(data)
        return loads(data)
    except DocumentFormatError as e:
        raise DocumentFormatError("{}: {}".format(path, e))


def render_document(path, value, indent=2):
    """Serialize a value in the format matching the file extension of path."""
    if is_yaml_path(path):
        text = dump_yaml(value)
    else:
        text = encode_text(value, indent) + "\n"
    return text.encode("utf-8")


def output_path(outdir, path):
    "Where the patched version of document path is written."
    return mirrored_path(outdir, path)


def write_documents(outdir, rendered):
    """Write rendered documents under outdir.

    rendered is a sequence of (document path, bytes) pairs.
    """
    for path, data in rendered:
        outpath = output_path(outdir, path)
        ensure_dir_exists(os.path.dirname(outpath))
        with io.open(outpath, "wb") as f:
            f.write(data)
        debug("Wrote %s", outpath)
