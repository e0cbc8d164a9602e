"""
pytest conftest: shared fixtures for unit tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


class RecordingRenderer:
    def __init__(self):
        self.cleared = 0
        self.rendered = []

    def clear(self):
        self.cleared += 1

    def render(self, errors):
        self.rendered.append(list(errors))


class CountingField:
    """Field handle that records how often its value is read."""

    def __init__(self, name, value=""):
        self.name = name
        self._value = value
        self.parent = None
        self.reads = 0

    @property
    def value(self):
        self.reads += 1
        return self._value


@pytest.fixture(autouse=True)
def fresh_settings():
    from input_validator.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def counting_field():
    return CountingField("counted", "value")


@pytest.fixture
def make_field():
    from input_validator import InputField, Container

    def _make(name, value="", with_container=True):
        parent = Container(name=f"{name}-group") if with_container else None
        return InputField(name=name, value=value, parent=parent)

    return _make
