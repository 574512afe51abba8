# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import LOG_LEVELS, init_logging, set_jpatch_log_level, level_from_name


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = level_from_name(default or 'INFO')
        init_logging(level=level)
        set_jpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = level_from_name(values)
        set_jpatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        sys.stderr.write('%s:\n' % header)
        for k, v in sorted(modify_config_for_print(config).items()):
            sys.stderr.write('  %s: %s\n' % (k, v))
        parser.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jpatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_output_args(parser):
    """Adds arguments controlling where and how patched documents are written.
    """
    parser.add_argument(
        '--outdir',
        default='.',
        help="the directory where patched documents are emitted. "
             "Each document is written at its own path below this "
             "directory, which overwrites the input by default.")
    parser.add_argument(
        '--indent',
        default=2,
        type=int,
        help="number of spaces used to indent patched JSON documents.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


filename_help = {
    "patch": "The patch filename. An RFC 6902 JSON Patch when documents "
             "are given, otherwise a batch file of {glob, jsonPatch} entries. "
             "Files ending in .yaml or .yml are read as YAML.",
    "documents": "The JSON or YAML documents to patch.",
    }


def add_filename_args(parser):
    """Add the patch and documents positional arguments.
    """
    parser.add_argument("patch", help=filename_help["patch"])
    parser.add_argument("documents", nargs="*", help=filename_help["documents"])


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
