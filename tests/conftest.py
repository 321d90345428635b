import os

import pytest

from json_const_generator import ProjectConfig, build_namespace, parse_json

LANG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'lang')


@pytest.fixture
def lang_dir():
    return LANG_DIR


@pytest.fixture
def build():
    """Build the namespace tree of a JSON text"""
    def _build(text, file_name='en_US', config=None):
        return build_namespace(parse_json(text), file_name, config or ProjectConfig())
    return _build
