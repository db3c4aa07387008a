#!/usr/bin/env python3
"""Export the monthly per-hotel commission report.

Usage:
    python scripts/export_monthly_commissions.py --month 2024-03
    python scripts/export_monthly_commissions.py --month 2024-03 --format json --output march.json
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from commission_engine.config import settings
from commission_engine.core.exceptions import AppException
from commission_engine.database import AsyncSessionLocal, close_db
from commission_engine.repositories import SqlAlchemyCommissionRepository
from commission_engine.services.accounting_export_service import accounting_export_service


async def export(month: str, fmt: str, output: Path | None) -> int:
    """Build the report and write it to ``output`` or stdout."""
    try:
        async with AsyncSessionLocal() as session:
            repository = SqlAlchemyCommissionRepository(session)
            try:
                if fmt == "json":
                    content = await accounting_export_service.export_month_json(repository, month)
                else:
                    content = await accounting_export_service.export_month_csv(repository, month)
            except AppException as e:
                print(f"ERROR: {e.detail}", file=sys.stderr)
                return 1
    finally:
        await close_db()

    if output:
        output.write_text(content + "\n", encoding="utf-8")
        print(f"Wrote {fmt.upper()} report for {month} to {output}")
    else:
        print(content)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export monthly commission report")
    parser.add_argument("--month", required=True, help="Month as YYYY-MM")
    parser.add_argument("--format", choices=["csv", "json"], default="csv", help="Output format")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")

    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(export(args.month, args.format, args.output)))
