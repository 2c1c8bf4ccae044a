import os

import pytest

from gof_patterns.catalog.registry import PatternRegistry
from gof_patterns.creational.singleton import SingleObject


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh singleton and registry."""
    SingleObject.reset_instance()
    PatternRegistry.reset_instance()
    yield
    SingleObject.reset_instance()
    PatternRegistry.reset_instance()


@pytest.fixture(autouse=True)
def clean_gof_environment(monkeypatch):
    """Strip GOF_* overrides inherited from the outer shell."""
    for key in list(os.environ):
        if key.startswith("GOF_"):
            monkeypatch.delenv(key, raising=False)
