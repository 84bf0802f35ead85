"""Shared fixtures for verifier tests."""

from __future__ import annotations

import logging
import os

import pytest

from iseefortune_verifier.config import settings as settings_module
from iseefortune_verifier.shared.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep host env vars and YAML files out of the settings under test."""
    for key in list(os.environ):
        if key.startswith("ISEEFORTUNE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ISEEFORTUNE_TEST_MODE", "true")
    monkeypatch.setattr(
        settings_module,
        "default_config_path",
        lambda: tmp_path / "no-such-verifier.yaml",
    )
    yield


@pytest.fixture(autouse=True)
def reset_verifier_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def vector_file(tmp_path):
    """Write a list of vector records to a temp JSON file and return its path."""
    import json

    def _write(records, name="vectors.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
