#!/usr/bin/env python3
"""Create (or amend) a hotel's commission agreement.

Usage:
    python scripts/create_agreement.py --hotel-id <UUID> --type PERCENTAGE --base-rate 0.10
    python scripts/create_agreement.py --hotel-id <UUID> --type FLAT_FEE --flat-amount 150 \
        --preferred-bonus 0.02 --tier 10:0.005 --valid-from 2024-04-01T00:00:00+00:00
"""

import argparse
import asyncio
import logging
import sys
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import ValidationError as SchemaValidationError

from commission_engine.config import settings
from commission_engine.core.exceptions import AppException
from commission_engine.database import AsyncSessionLocal, close_db
from commission_engine.domain.enums import CommissionType
from commission_engine.repositories import SqlAlchemyCommissionRepository
from commission_engine.schemas.commission import CommissionAgreementCreate, TierRuleCreate
from commission_engine.services.agreement_service import agreement_service


def parse_tier(value: str) -> TierRuleCreate:
    """Parse ``MIN_BOOKINGS:BONUS_RATE`` (e.g. ``10:0.005``)."""
    try:
        min_bookings, bonus_rate = value.split(":")
        return TierRuleCreate(min_bookings=int(min_bookings), bonus_rate=Decimal(bonus_rate))
    except (ValueError, ArithmeticError, SchemaValidationError) as e:
        raise argparse.ArgumentTypeError(f"Invalid tier '{value}', expected MIN:RATE") from e


def parse_instant(value: str) -> datetime:
    """ISO timestamp; naive values are taken as UTC."""
    instant = datetime.fromisoformat(value)
    return instant if instant.tzinfo else instant.replace(tzinfo=UTC)


async def create_agreement(hotel_id: UUID, data: CommissionAgreementCreate) -> int:
    try:
        async with AsyncSessionLocal() as session:
            repository = SqlAlchemyCommissionRepository(session)
            try:
                agreement = await agreement_service.create_agreement(repository, hotel_id, data)
            except AppException as e:
                print(f"ERROR: {e.detail}")
                return 1

        print(f"Created agreement {agreement.id} for hotel {hotel_id}")
        print(f"Type:       {agreement.type}")
        print(f"Valid from: {agreement.valid_from.isoformat()}")
        print(f"Active:     {agreement.is_active}")
        return 0
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a hotel commission agreement")
    parser.add_argument("--hotel-id", required=True, type=UUID, help="Hotel UUID")
    parser.add_argument("--type", required=True, choices=[t.value for t in CommissionType])
    parser.add_argument("--base-rate", type=Decimal, default=None, help="Rate for PERCENTAGE, e.g. 0.10")
    parser.add_argument("--flat-amount", type=Decimal, default=None, help="Fee for FLAT_FEE")
    parser.add_argument("--preferred-bonus", type=Decimal, default=None, help="Extra rate for PREFERRED hotels")
    parser.add_argument("--tier", action="append", type=parse_tier, default=[], help="MIN:RATE, repeatable")
    parser.add_argument("--valid-from", type=parse_instant, default=None, help="ISO timestamp (default: now)")
    parser.add_argument("--valid-to", type=parse_instant, default=None, help="ISO timestamp (default: open)")

    args = parser.parse_args()

    try:
        terms = CommissionAgreementCreate(
            type=args.type,
            base_rate=args.base_rate,
            flat_amount=args.flat_amount,
            preferred_bonus=args.preferred_bonus,
            valid_from=args.valid_from or datetime.now(UTC),
            valid_to=args.valid_to,
            tier_rules=args.tier,
        )
    except SchemaValidationError as e:
        parser.error(str(e))

    logging.basicConfig(level=settings.log_level)
    sys.exit(asyncio.run(create_agreement(args.hotel_id, terms)))
