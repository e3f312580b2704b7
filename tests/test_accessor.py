import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ilcf.config.accessor import ILCFConfig
from ilcf.core.errors import ConversionError, ILCFError, KeyNotFoundError

DOCUMENT = (
    "server\n"
    "\thost = localhost\n"
    "\tport = 8080\n"
    "\tratio = 0.75\n"
    "\tsecure = TRUE\n"
    "\tmode = r\n"
    "\tbanner =\n"
)


@pytest.fixture
def config():
    return ILCFConfig.loads(DOCUMENT)


def test_typed_getters(config):
    assert config.get_string("server_host") == "localhost"
    assert config.get_int("server_port") == 8080
    assert config.get_float("server_ratio") == 0.75
    assert config.get_bool("server_secure") is True
    assert config.get_char("server_mode") == "r"


def test_missing_key_raises_not_found(config):
    """NOT-FOUND TEST: absence is an error, never a None result."""
    with pytest.raises(KeyNotFoundError) as exc:
        config.get("server_user")
    assert exc.value.key == "server_user"
    assert isinstance(exc.value, KeyError)
    assert isinstance(exc.value, ILCFError)

    for getter in (config.get_int, config.get_float, config.get_bool, config.get_char):
        with pytest.raises(KeyNotFoundError):
            getter("server_user")


def test_lookup_is_discriminated(config):
    missing = config.lookup("server_user")
    assert missing.found is False
    assert missing.value is None

    empty = config.lookup("server_banner")
    assert empty.found is True
    assert empty.value == ""
    assert empty.unwrap() == ""

    with pytest.raises(KeyNotFoundError):
        missing.unwrap()


def test_get_with_default(config):
    assert config.get("server_user", "nobody") == "nobody"
    assert config.get("server_host", "nobody") == "localhost"


@pytest.mark.parametrize("getter, key", [
    ("get_int", "server_host"),
    ("get_int", "server_ratio"),
    ("get_float", "server_host"),
    ("get_bool", "server_port"),
    ("get_char", "server_host"),
    ("get_char", "server_banner"),
])
def test_conversion_errors(config, getter, key):
    with pytest.raises(ConversionError) as exc:
        getattr(config, getter)(key)
    assert exc.value.key == key
    assert isinstance(exc.value, ValueError)


def test_with_prefix_and_mapping_protocol(config):
    assert config.with_prefix("server")["port"] == "8080"
    assert "server_port" in config
    assert "server" not in config
    assert len(config) == 6
    assert sorted(config) == sorted(config.keys())
    assert config.as_dict()["server_mode"] == "r"


def test_empty_prefix_is_the_root_namespace(config):
    assert config.with_prefix("") == config.as_dict()
