"""
tests/cli/conftest.py

Shared setup for tests that drive the click entry point: a config file with
no delays, a scratch log store, and a logging setup that is put back after
each test.
"""

import logging

import pytest
import yaml
from click.testing import CliRunner

from loggit_cli.utils.log import LOGGERS


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_config(tmp_path):
    """Write a config file that disables every pause and logs to tmp."""
    config_file = tmp_path / "loggit.yaml"
    config_file.write_text(yaml.dump({
        "ui": {"input_delay": 0, "message_delay": 0},
        "logging": {"level": "DEBUG", "file": str(tmp_path / "loggit.log")},
    }))
    return config_file


@pytest.fixture
def cli_args(cli_config, store_path):
    """Build argv for the command with the scratch config and store."""
    def build(*args):
        return [*args, "--config", str(cli_config), "--db", str(store_path)]
    return build


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    for name in LOGGERS:
        named = logging.getLogger(name)
        for handler in list(named.handlers):
            named.removeHandler(handler)
            handler.close()
        named.setLevel(logging.NOTSET)
        named.propagate = True
