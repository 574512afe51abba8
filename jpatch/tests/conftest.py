# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import shutil

from pytest import fixture

from jpatch import config as jpatch_config
from jpatch.documents import read_data


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath, request):
    """Fixture for copying test files into a temporary directory.

    The working directory is changed to the copy for the duration of
    the test, since documents and globs are resolved against it.
    """
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    save_cwd = os.getcwd()
    os.chdir(str(dest))
    request.addfinalizer(lambda: os.chdir(save_cwd))
    return str(dest)


@fixture
def outdir(tmpdir):
    return str(tmpdir.join('out'))


@fixture
def document(filespath):
    return read_data(pjoin(filespath, 'document.json'))


@fixture
def patched_document(filespath):
    return read_data(pjoin(filespath, 'patched.json'))


@fixture(autouse=True)
def reset_config_cache():
    jpatch_config._config_cache.clear()
    yield
    jpatch_config._config_cache.clear()
