
import argparse
import json
import logging

import pytest

from traitlets import Enum, Integer

import jpatch.log
from jpatch.args import (
    ConfigBackedParser, LogLevelAction, add_output_args, add_filename_args,
    modify_config_for_print, prettyprint_config_from_args,
)
from jpatch.config import (
    entrypoint_configurables, build_config, Global, Output,
)


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


class FixtureOutputConfig(Output):
    indent = Integer(8).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


@pytest.fixture
def entrypoint_output_config():
    entrypoint_configurables['test-prog'] = FixtureOutputConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert jpatch.log.logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    # Parsers without registered config fall back to argparse defaults
    parser = ConfigBackedParser('other-prog')
    add_output_args(parser)
    arguments = parser.parse_args([])
    assert arguments.outdir == '.'
    assert arguments.indent == 2


def test_config_overrides_class_defaults(entrypoint_output_config, tmpdir):
    parser = ConfigBackedParser('test-prog')
    add_output_args(parser)
    arguments = parser.parse_args([])
    assert arguments.indent == 8

    tmpdir.join('jpatch_config.json').write_text(
        json.dumps({
            'Output': {'outdir': 'patched'},
            'FixtureOutputConfig': {'indent': 0},
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        arguments = parser.parse_args([])
    assert arguments.outdir == 'patched'
    assert arguments.indent == 0

    # Command line wins over config
    with tmpdir.as_cwd():
        arguments = parser.parse_args(['--indent', '3'])
    assert arguments.indent == 3


def test_build_config(tmpdir):
    with tmpdir.as_cwd():
        config = build_config('jpatch')
    assert config == {
        'log_level': 'INFO',
        'outdir': '.',
        'indent': 2,
        'use_color': True,
    }
    with pytest.raises(ValueError):
        build_config('no-such-prog')


def test_modify_config_for_print():
    assert modify_config_for_print({'a': 'x', 'b': {}, 'c': {'d': 1}}) == {
        'a': '"x"',
        'b': '{}',
        'c': {'d': '1'},
    }


def test_filename_args():
    parser = argparse.ArgumentParser()
    add_filename_args(parser)
    arguments = parser.parse_args(['patch.json'])
    assert arguments.patch == 'patch.json'
    assert arguments.documents == []
    arguments = parser.parse_args(['patch.json', 'a.json', 'b.yaml'])
    assert arguments.documents == ['a.json', 'b.yaml']


def test_prettyprint_config_from_args():
    arguments = argparse.Namespace(use_color=False)
    config = prettyprint_config_from_args(arguments)
    assert config.use_color is False
    assert prettyprint_config_from_args(argparse.Namespace()).use_color is True
