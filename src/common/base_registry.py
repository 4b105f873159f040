"""
どこで: `common.base_registry`。
何を: 名前 → 関数の登録表（キー正規化・重複検出・既定値フォールバック付き取得）。
なぜ: 波形ジェネレータを UI 側の文字列から安全に引けるよう、正規化規則を一箇所に集約するため。
"""

from __future__ import annotations

import re
from typing import Any, Callable


class BaseRegistry:
    """名前付き登録表。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフン→アンダースコア）。
    - デコレータは名前省略可。省略時は関数名から自動推論します。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "HarmonicOvertone" / "harmonic-overtone" -> "harmonic_overtone"）。"""
        if not isinstance(name, str):
            raise TypeError(f"レジストリキーは str である必要があります: got {type(name)!r}")
        key = name.strip()
        if not key:
            raise ValueError("レジストリキーは空であってはなりません")
        key = key.replace("-", "_").replace(" ", "_")
        # 大文字を含む場合のみキャメル→スネーク変換
        if any(c.isupper() for c in key):
            key = cls._camel_to_snake(key)
        return re.sub(r"_+", "_", key.lower())

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self.normalize_key(name) if name else self.normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録された関数を取得。未登録なら KeyError。"""
        key = self.normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（登録順）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        try:
            return self.normalize_key(name) in self._registry
        except (TypeError, ValueError):
            return False

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self.normalize_key(name), None)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリのコピー（外部からの変更は内部に影響しない）。"""
        return self._registry.copy()
