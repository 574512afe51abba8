# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_output_args, add_prettyprint_args,
    add_filename_args, prettyprint_config_from_args,
    )
from .batch import apply_batch_file, apply_patch_file
from .errors import JPatchError
from .log import debug, info, level_from_name, set_jpatch_log_level
from .prettyprint import pretty_print_error
from .utils import setup_std_streams


_description = "Apply RFC 6902 JSON Patches to JSON or YAML documents."

_epilog = """\
If at least one document is given, the patch file is parsed as an RFC 6902
JSON Patch and applied to every document.

If no documents are given, the patch file is parsed as a batch file:

  [
    {
      "glob": "*.json",
      "jsonPatch": [
        { "op": "add", "path": "/a", "value": 1 }
      ]
    },
    {
      "glob": "*.yaml",
      "jsonPatch": [
        { "op": "test", "path": "/b", "value": 1 },
        { "op": "remove", "path": "/b" }
      ]
    }
  ]

No document is written unless every document was patched successfully.
"""


def main_patch(args):
    """Main handler of the jpatch CLI"""
    # The argparse action only runs for an explicit --log-level,
    # a level from the config files arrives as a default
    set_jpatch_log_level(level_from_name(args.log_level))

    patch_filename = args.patch
    document_filenames = args.documents

    for fn in [patch_filename] + document_filenames:
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1
    if args.indent < 0:
        print("Indent must be a non-negative number, not {}".format(args.indent))
        return 1

    config = prettyprint_config_from_args(args, out=sys.stdout)
    try:
        if document_filenames:
            info("Applying %s to %d document(s)", patch_filename, len(document_filenames))
            written = apply_patch_file(
                patch_filename, document_filenames, args.outdir, args.indent)
        else:
            info("Applying batch file %s", patch_filename)
            written = apply_batch_file(patch_filename, args.outdir, args.indent)
    except JPatchError as e:
        pretty_print_error(e, config)
        return 1
    except OSError as e:
        debug("I/O error", exc_info=True)
        print(e)
        return 1

    debug("Wrote %d document(s) under %s", len(written), args.outdir)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jpatch command."""
    parser = ConfigBackedParser(
        prog=prog or 'jpatch',
        description=_description,
        epilog=_epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=True,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
