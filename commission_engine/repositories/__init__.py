"""Data access adapters."""

from commission_engine.repositories.base import CommissionRepository
from commission_engine.repositories.sqlalchemy_repository import SqlAlchemyCommissionRepository

__all__ = ["CommissionRepository", "SqlAlchemyCommissionRepository"]
