"""
どこで: `common.logging`。
何を: ランナー/CLI 用のロギング初期化（1 度だけ `basicConfig` を適用）。
なぜ: ライブラリ側は `logging.getLogger(__name__)` だけを使い、設定はエントリポイントに寄せるため。

レベルの決まり方:
1) 引数 `level`（CLI の `--log-level`）
2) 環境変数 `EPC_LOG_LEVEL`
3) "INFO"
"""

from __future__ import annotations

import logging

from .env import env_str

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """レベル指定を `logging` の数値へ。未知の名前は INFO。"""
    if level is None:
        level = env_str("EPC_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        return value if isinstance(value, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> int:
    """ルートロガーが未設定なら最小構成を適用し、採用したレベルを返す。

    既にハンドラがある（アプリや pytest が設定済み）場合は何もしない。
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        return lvl
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    # pyglet の DEBUG はフレームごとに出るので抑える
    if lvl <= logging.DEBUG:
        logging.getLogger("pyglet").setLevel(logging.INFO)
    return lvl


__all__ = ["LOG_FORMAT", "resolve_level", "setup_default_logging"]
