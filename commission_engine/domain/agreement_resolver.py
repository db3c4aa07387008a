"""Temporal resolution of commission agreements.

An agreement governs the half-open interval ``[valid_from, valid_to)``;
``valid_to = None`` means open-ended. Resolution ignores ``is_active``:
a superseded agreement still governs the dates it covered.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from commission_engine.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def covers(agreement, reference_date: datetime) -> bool:
    """Check whether ``reference_date`` lies inside the agreement interval."""
    if agreement.valid_from > reference_date:
        return False
    return agreement.valid_to is None or reference_date < agreement.valid_to


def resolve_agreement(hotel_id, reference_date: datetime, agreements: Iterable):
    """Select the agreement in force for a hotel at ``reference_date``.

    Linear scan; when several agreements overlap the date (a data
    anomaly) the most recently started one wins.

    Raises:
        NotFoundError: no agreement covers the date.
    """
    selected = None
    matches = 0
    for agreement in agreements:
        if agreement.hotel_id != hotel_id or not covers(agreement, reference_date):
            continue
        matches += 1
        if selected is None or agreement.valid_from > selected.valid_from:
            selected = agreement

    if selected is None:
        raise NotFoundError(
            detail=f"No commission agreement found for hotel {hotel_id} at {reference_date.isoformat()}"
        )

    if matches > 1:
        logger.warning(
            f"Overlapping commission agreements for hotel {hotel_id} at "
            f"{reference_date.isoformat()}: {matches} matches, using valid_from={selected.valid_from.isoformat()}"
        )
    return selected


def supersede_agreements(agreements: Iterable, effective_at: datetime) -> list:
    """Close every active agreement at ``effective_at``.

    Each active agreement is deactivated and its ``valid_to`` capped at
    ``effective_at``. Returns the agreements that were changed.
    """
    superseded = []
    for agreement in agreements:
        if not agreement.is_active:
            continue
        agreement.is_active = False
        if agreement.valid_to is None or agreement.valid_to > effective_at:
            agreement.valid_to = effective_at
        superseded.append(agreement)
    return superseded
