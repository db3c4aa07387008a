"""Commission agreement lifecycle service."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from commission_engine.core.exceptions import NotFoundError
from commission_engine.domain.agreement_resolver import resolve_agreement, supersede_agreements
from commission_engine.models.hotel import CommissionAgreement, TierRule
from commission_engine.repositories.base import CommissionRepository
from commission_engine.schemas.commission import CommissionAgreementCreate

logger = logging.getLogger(__name__)


class AgreementService:
    """Create, supersede and look up hotel commission agreements."""

    async def create_agreement(
        self,
        repository: CommissionRepository,
        hotel_id: UUID,
        data: CommissionAgreementCreate,
        now: datetime | None = None,
    ) -> CommissionAgreement:
        """Store new terms for a hotel.

        An agreement starting now or in the past takes effect immediately:
        every active agreement of the hotel is closed at ``now`` first.
        A future-dated agreement is stored inactive.
        """
        hotel = await repository.get_hotel(hotel_id)
        if hotel is None:
            raise NotFoundError("Hotel", str(hotel_id))

        now = now or datetime.now(UTC)
        is_immediately_active = data.valid_from <= now

        if is_immediately_active:
            existing = await repository.list_agreements(hotel_id)
            superseded = supersede_agreements(existing, now)
            for old in superseded:
                logger.info(
                    f"Commission agreement superseded agreement_id={old.id} hotel_id={hotel_id} "
                    f"valid_to={old.valid_to.isoformat()}"
                )

        agreement = CommissionAgreement(
            hotel_id=hotel_id,
            type=data.type.value,
            base_rate=data.base_rate,
            flat_amount=data.flat_amount,
            preferred_bonus=data.preferred_bonus,
            valid_from=data.valid_from,
            valid_to=data.valid_to,
            is_active=is_immediately_active,
            tier_rules=[
                TierRule(min_bookings=rule.min_bookings, bonus_rate=rule.bonus_rate)
                for rule in data.tier_rules
            ],
        )
        stored = await repository.save_agreement(agreement)

        logger.info(
            f"Commission agreement created hotel_id={hotel_id} type={data.type.value} "
            f"valid_from={data.valid_from.isoformat()} active={is_immediately_active}"
        )
        return stored

    async def get_agreement_at(
        self,
        repository: CommissionRepository,
        hotel_id: UUID,
        at: datetime | None = None,
    ) -> CommissionAgreement:
        """Agreement governing the hotel at ``at`` (default: now)."""
        hotel = await repository.get_hotel(hotel_id)
        if hotel is None:
            raise NotFoundError("Hotel", str(hotel_id))

        agreements = await repository.list_agreements(hotel_id)
        return resolve_agreement(hotel_id, at or datetime.now(UTC), agreements)


agreement_service = AgreementService()
