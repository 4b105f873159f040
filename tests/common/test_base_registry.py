from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def HarmonicThing():  # noqa: N802 (テスト用)
        return 1

    assert reg.is_registered("harmonic_thing")
    assert reg.get("HarmonicThing") is HarmonicThing
    assert reg.get("harmonic-thing") is HarmonicThing
    assert "harmonic_thing" in reg.list_all()


def test_duplicate_and_unregister() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def sample():  # noqa: ANN202 - テスト用
        return 1

    with pytest.raises(ValueError):
        reg.register("sample")(lambda: 2)

    reg.unregister("Sample")
    assert not reg.is_registered("sample")
    reg.unregister("nonexistent")  # 例外にならない


def test_invalid_keys() -> None:
    with pytest.raises(ValueError):
        BaseRegistry.normalize_key("   ")
    with pytest.raises(TypeError):
        BaseRegistry.normalize_key(3)  # type: ignore[arg-type]
    reg = BaseRegistry()
    assert reg.is_registered("") is False


def test_registry_property_is_copy() -> None:
    reg = BaseRegistry()
    snap = reg.registry
    snap["x"] = 1
    assert not reg.is_registered("x")
