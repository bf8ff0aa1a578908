"""Pytest fixtures for simplecheck tests."""

import pathlib

import pytest

from simplecheck.core.config import reset_config
from simplecheck.registry import get_registry
from simplecheck.report import ResultAggregator


@pytest.fixture(scope="session")
def project_root():
    return pathlib.Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def _default_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def aggregator(monkeypatch):
    """Install a fresh aggregator as the process-wide instance.

    The fresh object is not registered with atexit, so tests never add to the
    summary printed when the test session ends.
    """
    fresh = ResultAggregator()
    monkeypatch.setattr(ResultAggregator, "_instance", fresh)
    return fresh


@pytest.fixture
def registry():
    """The global check block registry, emptied before and after the test."""
    reg = get_registry()
    reg.clear()
    yield reg
    reg.clear()
