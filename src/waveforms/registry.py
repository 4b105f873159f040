"""
どこで: `waveforms` のレジストリ層（関数専用）。
何を: `@waveform` デコレータで係数ジェネレータを登録し、取得/一覧/フェイルセーフ解決を提供。
なぜ: UI から届く波形名（文字列）を境界で一度だけ `WaveformKind` に写し、内部は列挙で扱うため。

概要:
- 登録 API: `@waveform` / `get_waveform` / `list_waveforms` / `is_waveform_registered`。
- `parse_kind(name)` が文字列 → `WaveformKind` の唯一の変換点。未知名は SQUARE。
- `resolve(name)` は未知名でも例外を出さず矩形波ジェネレータを返す。
"""

from __future__ import annotations

import inspect
import logging
from functools import partial
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

from .model import WaveformGenerator, WaveformKind

logger = logging.getLogger(__name__)

WaveformFn = Callable[..., Any]

DEFAULT_SCALE = 75.0
FALLBACK_KIND = WaveformKind.SQUARE

_waveform_registry = BaseRegistry()


def waveform(arg: Any | None = None, /, name: str | None = None):
    """波形ジェネレータ関数をレジストリに登録するデコレータ。

    使用例:
    - `@waveform` / `@waveform()`                       → 関数名から自動推論。
    - `@waveform("custom")` / `@waveform(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@waveform は関数のみ登録可能です: got {obj!r}")
        return _waveform_registry.register(resolved_name)(obj)

    # 直付け (@waveform)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@waveform("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def parse_kind(name: object) -> WaveformKind:
    """UI 側の波形名を `WaveformKind` に写す。未知/不正な名前は SQUARE。"""
    if isinstance(name, WaveformKind):
        return name
    try:
        key = BaseRegistry.normalize_key(name)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.debug("invalid waveform name %r; falling back to %s", name, FALLBACK_KIND.value)
        return FALLBACK_KIND
    for kind in WaveformKind:
        if kind.value == key:
            return kind
    logger.debug("unknown waveform %r; falling back to %s", name, FALLBACK_KIND.value)
    return FALLBACK_KIND


def generator_for(kind: WaveformKind) -> WaveformFn:
    """列挙値に対応する登録済みジェネレータを返す。"""
    return _waveform_registry.get(kind.value)


def resolve(name: object, *, scale: float | None = None) -> WaveformGenerator:
    """波形名からジェネレータ `Octave -> Wave` を解決する（フェイルセーフ）。

    引数:
        name: 波形名（"square" / "sawtooth" / "harmonic_overtone"、表記ゆれ可）。
        scale: 振幅スケール A。None または既定値と等しい場合は登録関数そのものを返す。

    返り値:
        Octave を受け取り Wave を返す純関数。未知名は矩形波。
    """
    fn = generator_for(parse_kind(name))
    if scale is None or float(scale) == DEFAULT_SCALE:
        return fn
    return partial(fn, scale=float(scale))


def get_waveform(name: str) -> WaveformFn:
    """登録された波形関数を取得（未登録は KeyError。フェイルセーフ版は `resolve`）。"""
    return _waveform_registry.get(name)


def list_waveforms() -> list[str]:
    """登録されている波形名の一覧（ソート済み）。"""
    return sorted(_waveform_registry.list_all())


def is_waveform_registered(name: str) -> bool:
    return _waveform_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _waveform_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _waveform_registry.registry


__all__ = [
    "DEFAULT_SCALE",
    "waveform",
    "parse_kind",
    "generator_for",
    "resolve",
    "get_waveform",
    "list_waveforms",
    "is_waveform_registered",
    "unregister",
    "get_registry",
]
