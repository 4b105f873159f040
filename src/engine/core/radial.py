"""
どこで: `engine.core.radial`。
何を: エピサイクル連鎖から各円の半径線（中心 → 次の中心）を導出し、最後の先端を「ペン先」とする。
なぜ: 最後の半径線の終点が、軌跡と波形プロットの両方に入る唯一の点だから。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from common.types import Vec2

from .epicycle import Epicycle, next_center


@dataclass(frozen=True)
class RadialSegment:
    p1: Vec2
    p2: Vec2


def derive_radials(t: float, epis: Sequence[Epicycle]) -> list[RadialSegment]:
    """`epis` と同数の半径線を返す。最後の終点は `next_center(t, epis[-1])`。"""
    radials: list[RadialSegment] = []
    last = len(epis) - 1
    for i, epi in enumerate(epis):
        p2 = epis[i + 1].center if i < last else next_center(t, epi)
        radials.append(RadialSegment(p1=epi.center, p2=p2))
    return radials


def pencil_tip(radials: Sequence[RadialSegment]) -> Vec2 | None:
    """ペン先（最後の半径線の終点）。半径線が無ければ None。"""
    if not radials:
        return None
    return radials[-1].p2


__all__ = ["RadialSegment", "derive_radials", "pencil_tip"]
