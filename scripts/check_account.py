#!/usr/bin/env python3
"""Backpack 계정/잔고 확인 스크립트 (인증 요청)"""

import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.backpack import BackpackAPI
from core.config.loader import get_settings
from core.logging import setup_logging


async def main():
    settings = get_settings()

    async with BackpackAPI.from_config(settings.exchange_config) as bp:
        status = await bp.system.get_status()
        account = await bp.account.get_account()
        balances = await bp.capital.get_balances()

    print("=" * 60)
    print("=== Backpack 계정 확인 ===")
    print("=" * 60)

    print(f"\n[1] 시스템 상태: {status}")
    print("\n[2] 계정 설정:")
    print(json.dumps(account, indent=2))
    print("\n[3] 잔고:")
    print(json.dumps(balances, indent=2))


if __name__ == "__main__":
    setup_logging("check_account")
    asyncio.run(main())
