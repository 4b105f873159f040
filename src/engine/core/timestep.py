"""
どこで: `engine.core.timestep`。
何を: 位相 t ∈ [0, 2π) を 1 ステップ固定量 dt だけ進める（2π で折り返す）。
なぜ: アニメーションは 1 回転分の位相の関数として表すため。

dt は描画 1 ステップあたりのシミュレーション時間で、実時間（経過秒）からは導かない。
したがって見かけの速度はホストの描画レートに比例する。
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def step_time(t: float, dt: float) -> float:
    """`(t + dt) mod 2π` を返す。結果は常に [0, 2π)。

    例外:
        ValueError: `dt` が有限でない場合。
    """
    if not math.isfinite(dt):
        raise ValueError(f"dt は有限値である必要があります: got {dt!r}")
    nt = math.fmod(t + dt, TWO_PI)
    if nt < 0.0:
        nt += TWO_PI
    # 負の微小値の補正で 2π ちょうどになる場合
    return 0.0 if nt >= TWO_PI else nt


__all__ = ["TWO_PI", "step_time"]
