#!/usr/bin/env python3
"""Backpack 캔들 조회 스크립트

사용법:
    python scripts/klines.py SUI_USDC --interval 1m --start-time 1746801907
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.backpack import BackpackAPI
from core.config.loader import get_settings
from core.logging import setup_logging

logger = logging.getLogger("scripts.klines")


async def main(args: argparse.Namespace) -> None:
    settings = get_settings()

    async with BackpackAPI.from_config(settings.exchange_config) as bp:
        klines = await bp.markets.get_klines(
            symbol=args.symbol,
            interval=args.interval,
            start_time=args.start_time,
            end_time=args.end_time,
        )

    logger.info("캔들 조회 완료", extra={"symbol": args.symbol})
    print(json.dumps(klines, indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Backpack 캔들 조회")
    parser.add_argument("symbol", help="마켓 심볼 (예: SUI_USDC)")
    parser.add_argument("--interval", default="1m", help="캔들 간격 (기본: 1m)")
    parser.add_argument("--start-time", required=True, help="시작 시각 (초 단위 epoch)")
    parser.add_argument("--end-time", default=None, help="종료 시각 (초 단위 epoch)")
    args = parser.parse_args()

    setup_logging("klines")
    asyncio.run(main(args))
