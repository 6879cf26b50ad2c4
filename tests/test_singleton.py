"""
tests/test_singleton.py
=======================
Covers core/singleton.py — the metaclass behind Config.
"""
import pytest

from core.config import Config
from core.singleton import SingletonMeta


class _Registry(metaclass=SingletonMeta):
    def __init__(self):
        self.items = []


@pytest.fixture(autouse=True)
def fresh_registry():
    _Registry.clear_instance()
    yield
    _Registry.clear_instance()


class TestSingletonMeta:

    def test_same_instance(self):
        assert _Registry() is _Registry()

    def test_get_instance_matches_call(self):
        assert _Registry.get_instance() is _Registry()

    def test_clear_instance_creates_new(self):
        first = _Registry()
        first.items.append(1)
        _Registry.clear_instance()
        second = _Registry()
        assert second is not first
        assert second.items == []

    def test_clear_instance_leaves_others(self):
        reg = _Registry()
        cfg = Config()
        _Registry.clear_instance()
        assert Config() is cfg
        assert _Registry() is not reg

    def test_clear_all_instances_through_class(self):
        reg = _Registry()
        cfg = Config()
        Config.clear_all_instances()
        assert Config() is not cfg
        assert _Registry() is not reg

    def test_clear_instance_when_absent(self):
        _Registry.clear_instance()
        _Registry.clear_instance()
        assert isinstance(_Registry(), _Registry)
