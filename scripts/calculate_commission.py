#!/usr/bin/env python3
"""Calculate and store the commission for one completed booking.

Usage:
    python scripts/calculate_commission.py --booking-id <UUID>
"""

import argparse
import asyncio
import logging
import sys
from uuid import UUID

from commission_engine.config import settings
from commission_engine.core.exceptions import AppException
from commission_engine.database import AsyncSessionLocal, close_db
from commission_engine.repositories import SqlAlchemyCommissionRepository
from commission_engine.services.commission_service import commission_service


async def calculate(booking_id: UUID) -> int:
    """Run one calculation and print its breakdown."""
    try:
        async with AsyncSessionLocal() as session:
            repository = SqlAlchemyCommissionRepository(session)
            try:
                calculation = await commission_service.calculate_for_booking(repository, booking_id)
            except AppException as e:
                print(f"ERROR: {e.detail}")
                return 1

        print(f"Booking:         {calculation.booking_id}")
        print(f"Base amount:     {calculation.base_amount}")
        print(f"Base rate:       {calculation.base_rate if calculation.base_rate is not None else '-'}")
        print(f"Preferred bonus: {calculation.preferred_bonus}")
        print(f"Tier bonus:      {calculation.tier_bonus}")
        print(f"Total:           {calculation.total_amount}")
        return 0
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Calculate commission for a completed booking")
    parser.add_argument("--booking-id", required=True, type=UUID, help="Booking UUID")

    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(calculate(args.booking_id)))
