# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import sys


# Level names accepted on the command line and in config files
LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


def level_from_name(name):
    if name not in LOG_LEVELS:
        raise ValueError('Unknown log level %r, expected one of %r' % (name, LOG_LEVELS))
    return getattr(logging, name)


def init_logging(level=logging.INFO):
    """Sets up logging for the jpatch command.

    Log records go to stderr, so that they never mix with error
    messages printed to stdout. Sets the log level for all jpatch
    loggers to `level`, unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level, stream=sys.stderr)
    logging.captureWarnings(True)


def set_jpatch_log_level(level, set_main=True):
    """Set a log level for jpatch loggers"""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('jpatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
