import copy
import os
from pathlib import Path

import pytest

import oafragment.log
from oafragment.loader import loads

LOADED_FILES = {}
FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def skip_env(request):
    if request.node.get_closest_marker("skip_env"):
        m = set(request.node.get_closest_marker("skip_env").args) & set(os.environ.keys())
        if m:
            pytest.skip(f"skipped due to env : {sorted(m)}")


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "skip_env(env): skip test if the environment variable is set",
    )


def _get_parsed_yaml(filename):
    """
    Returns a python dict that is a parsed yaml file from the tests/fixtures
    directory.

    :param filename: The filename to load.  Must exist in tests/fixtures and
                     include extension.
    :type filename: str
    """
    if filename not in LOADED_FILES:
        with (FIXTURES / filename).open("rb") as f:
            LOADED_FILES[filename] = loads(f.read(), "yaml")

    return copy.deepcopy(LOADED_FILES[filename])


@pytest.fixture
def with_media_type_multipart():
    """
    Provides a multipart MediaType with encodings, headers and examples
    """
    yield _get_parsed_yaml("media-type-multipart.yaml")


@pytest.fixture
def with_encoding_form():
    """
    Provides a form-urlencoded Encoding with extensions
    """
    yield _get_parsed_yaml("encoding-form.yaml")


@pytest.fixture
def with_header_content():
    """
    Provides a Header described using content
    """
    yield _get_parsed_yaml("header-content.yaml")


@pytest.fixture
def logging_handlers():
    oafragment.log.reset()
    yield
    oafragment.log.reset()
