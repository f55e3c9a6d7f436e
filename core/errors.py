"""
Error taxonomy shared by the Scoring Engine, Ranking Service and Entity Store.

NotFoundError and InvalidInputError are caller errors and carry enough
detail to correct the request. InternalFailureError wraps unexpected store
failures; its message is never shown to callers.
"""

from typing import Any, Dict, List, Optional


class SkillboardError(Exception):
    """Base exception for domain errors."""
    pass


class NotFoundError(SkillboardError):
    """Raised when a referenced user, skill, endorsement or achievement does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class InvalidInputError(SkillboardError):
    """Raised when input fails schema, type or enumeration validation."""

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        self.details = details or []
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInputError":
        return cls(f"Invalid value for {field}: {message}", [{"field": field, "message": message}])


class InternalFailureError(SkillboardError):
    """Raised when the store fails unexpectedly; the unit of work is rolled back."""
    pass
