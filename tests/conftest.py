"""Shared pytest fixtures for the transaction display test-suite."""
from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import config
import display_logging
from models.keys import PublicKey


@pytest.fixture(scope="session", autouse=True)
def test_environment() -> Iterator[None]:
    """Ensure tests run with the dedicated 'test' configuration and logging."""
    original_env = os.environ.get("TXN_ENV")
    os.environ["TXN_ENV"] = "test"

    config.reload_settings(env="test")
    display_logging.configure(config.settings.logging, force=True)

    yield

    if original_env is None:
        os.environ.pop("TXN_ENV", None)
        config.reload_settings(env="development")
    else:
        os.environ["TXN_ENV"] = original_env
        config.reload_settings(env=original_env)


@pytest.fixture()
def alice() -> PublicKey:
    return PublicKey("ed25519", bytes(range(32)))
