"""
どこで: `common.settings`
何を: シミュレーション定数（スケール・dt・軌跡容量・オクターブ範囲・既定波形）を環境変数から型付きで読み込む。
なぜ: 観測値が版ごとに異なる定数（A=69〜75, dt=0.0125〜0.025, 容量 256/512）を設定として扱うため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int, env_str


@dataclass
class _Settings:
    # 波形
    SCALE: float = 75.0
    DEFAULT_WAVEFORM: str = "square"

    # 時間
    DT: float = 0.025

    # 軌跡
    TRAJECTORY_CAPACITY: int = 256

    # オクターブ（UI 側のクランプ範囲）
    DEFAULT_OCTAVES: int = 5
    OCTAVES_MIN: int = 2
    OCTAVES_MAX: int = 24

    # Misc
    DEBUG_SIMULATION: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数（接頭辞 `EPC_`）から設定を再読込。

    - 容量は下限 1 に丸める。
    - dt は正の有限値のみ採用（それ以外は既定値）。
    - オクターブ範囲は min <= default <= max に整える。
    """
    _settings.SCALE = env_float("EPC_SCALE", 75.0)
    _settings.DEFAULT_WAVEFORM = env_str("EPC_WAVEFORM", "square")

    dt = env_float("EPC_DT", 0.025)
    _settings.DT = dt if dt > 0.0 else 0.025

    _settings.TRAJECTORY_CAPACITY = env_int("EPC_TRAJECTORY_CAPACITY", 256, min_value=1) or 256

    lo = env_int("EPC_OCTAVES_MIN", 2, min_value=0) or 0
    hi = env_int("EPC_OCTAVES_MAX", 24, min_value=lo) or lo
    _settings.OCTAVES_MIN = lo
    _settings.OCTAVES_MAX = hi
    _settings.DEFAULT_OCTAVES = env_int("EPC_OCTAVES", 5, min_value=lo, max_value=hi) or lo

    _settings.DEBUG_SIMULATION = env_bool("EPC_DEBUG_SIMULATION", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
