#!/usr/bin/env python3
"""Mark a pending booking as completed, optionally calculating its commission.

Usage:
    python scripts/complete_booking.py --booking-id <UUID>
    python scripts/complete_booking.py --booking-id <UUID> --calculate
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
from commission_engine.services.booking_service import booking_service
from commission_engine.services.commission_service import commission_service


async def complete(booking_id: UUID, calculate: bool) -> int:
    try:
        async with AsyncSessionLocal() as session:
            repository = SqlAlchemyCommissionRepository(session)
            try:
                booking = await booking_service.complete_booking(repository, booking_id)
                print(f"Completed booking {booking.id} at {booking.completed_at.isoformat()}")

                if calculate:
                    calculation = await commission_service.calculate_for_booking(repository, booking_id)
                    print(f"Commission: {calculation.total_amount}")
            except AppException as e:
                print(f"ERROR: {e.detail}")
                return 1
        return 0
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Complete a booking")
    parser.add_argument("--booking-id", required=True, type=UUID, help="Booking UUID")
    parser.add_argument("--calculate", action="store_true", help="Also calculate its commission")

    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(complete(args.booking_id, args.calculate)))
