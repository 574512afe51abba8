# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .errors import DocumentPatchError, OperationError, TestFailed
from .patch_format import to_json_entry
from .value import encode_text


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'EXPECTED',
    'ACTUAL',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        EXPECTED = '{color}-  '.format(color=colorama.Fore.RED),
        ACTUAL   = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO     = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET    = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        EXPECTED = '-  ',
        ACTUAL   = '+  ',
        INFO     = '## ',
        RESET    = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=None, use_color=True):
        self._out = out
        self.use_color = use_color

    @property
    def out(self):
        # Looked up late, sys.stdout may be replaced after import
        return sys.stdout if self._out is None else self._out

    @property
    def EXPECTED(self):
        return col_const[self.use_color].EXPECTED

    @property
    def ACTUAL(self):
        return col_const[self.use_color].ACTUAL

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format a JSON value for printing, compact if it fits on one line."
    text = encode_text(v, indent=None)
    if len(text) > 60:
        text = encode_text(v, indent=2)
    return text


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed."""
    for line in format_value(value).splitlines():
        config.out.write("%s%s%s\n" % (prefix, line, config.RESET))


def pretty_print_operation(error, config=DefaultConfig):
    "Print which operation of a patch failed."
    if error.operation is None:
        return
    entry = to_json_entry(error.operation)
    entry.pop("value", None)
    config.out.write("%soperation %s: %s%s\n" % (
        config.INFO, error.index, encode_text(entry, indent=None), config.RESET))


def pretty_print_test_failure(error, config=DefaultConfig):
    config.out.write("%sexpected at %s:%s\n" % (config.INFO, error.pointer, config.RESET))
    pretty_print_value(error.expected, IND + config.EXPECTED, config)
    config.out.write("%sfound:%s\n" % (config.INFO, config.RESET))
    pretty_print_value(error.actual, IND + config.ACTUAL, config)


def pretty_print_error(error, config=DefaultConfig):
    """Print a jpatch error.

    The first line is the error message itself. Failed operations
    are followed by the operation, and failed tests by the expected
    and actual values.
    """
    config.out.write("%s\n" % (error,))
    if isinstance(error, DocumentPatchError):
        error = error.error
    if isinstance(error, OperationError):
        pretty_print_operation(error, config)
    if isinstance(error, TestFailed):
        pretty_print_test_failure(error, config)
