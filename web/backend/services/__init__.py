"""Business logic services."""

from .endorsement_service import EndorsementService
