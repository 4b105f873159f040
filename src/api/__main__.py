"""
どこで: `api.__main__`（`python -m api`）。
何を: コマンドライン引数でオクターブ数・波形・FPS・dt・軌跡容量を指定してランナーを起動する。
"""

from __future__ import annotations

import argparse
from typing import Sequence

from common.logging import setup_default_logging
from waveforms import list_waveforms


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="epicycles", description="Fourier-series epicycle animation")
    p.add_argument("--octaves", type=int, default=None, help="initial number of octaves")
    p.add_argument(
        "--waveform",
        default=None,
        help=f"initial waveform ({', '.join(list_waveforms())}); unknown names fall back to square",
    )
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--dt", type=float, default=None, help="phase increment per tick")
    p.add_argument("--capacity", type=int, default=None, help="trajectory buffer capacity")
    p.add_argument("--scale", type=float, default=None, help="amplitude scale A")
    p.add_argument("--size", type=int, nargs=2, metavar=("W", "H"), default=None)
    p.add_argument("--log-level", default=None, help="logging level (default: $EPC_LOG_LEVEL or INFO)")
    p.add_argument("--init-only", action="store_true", help="resolve configuration and exit")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    from .sketch import run_epicycles

    run_epicycles(
        octaves=args.octaves,
        waveform=args.waveform,
        window_size=tuple(args.size) if args.size else None,
        fps=args.fps,
        dt=args.dt,
        capacity=args.capacity,
        scale=args.scale,
        init_only=args.init_only,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
