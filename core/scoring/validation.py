"""
Input validation for Scoring Engine operations.

Every check here runs before the engine touches the store, so a rejected
call leaves no trace. Errors are collected per field so callers can fix
everything in one round trip.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional

from core.errors import InvalidInputError
from database.models import Proficiency

DEFAULT_SKILL_SOURCE = "manual"

# Fields a caller may change through update_skill
UPDATABLE_SKILL_FIELDS = ('name', 'category', 'proficiency', 'source')


def _error(field: str, message: str) -> Dict[str, str]:
    return {"field": field, "message": message}


def _check_text(value: Any, field: str, errors: List[Dict[str, str]], required: bool = True) -> Optional[str]:
    if value is None:
        if required:
            errors.append(_error(field, "field required"))
        return None
    if not isinstance(value, str):
        errors.append(_error(field, "must be a string"))
        return None
    value = value.strip()
    if required and not value:
        errors.append(_error(field, "must not be empty"))
        return None
    return value


def _check_proficiency(value: Any, field: str, errors: List[Dict[str, str]]) -> Optional[str]:
    if isinstance(value, Proficiency):
        return value.value
    if value is None:
        errors.append(_error(field, "field required"))
        return None
    if value not in Proficiency.values():
        errors.append(_error(field, f"must be one of {', '.join(Proficiency.values())}"))
        return None
    return value


def check_id(value: Any, field: str) -> int:
    """Reject anything that is not a positive integer identifier."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError.for_field(field, "must be a positive integer")
    return value


def check_points(value: Any, field: str = "points") -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputError.for_field(field, "must be a non-negative integer")
    return value


def _skill_errors(
    name: Any,
    category: Any,
    proficiency: Any,
    source: Any,
    prefix: str = ""
) -> tuple:
    errors: List[Dict[str, str]] = []
    fields = {
        'name': _check_text(name, f"{prefix}name", errors),
        'category': _check_text(category, f"{prefix}category", errors),
        'proficiency': _check_proficiency(proficiency, f"{prefix}proficiency", errors),
        'source': _check_text(source, f"{prefix}source", errors, required=False) or DEFAULT_SKILL_SOURCE,
    }
    return fields, errors


def validate_skill(name: Any, category: Any, proficiency: Any, source: Any = None) -> Dict[str, str]:
    fields, errors = _skill_errors(name, category, proficiency, source)
    if errors:
        raise InvalidInputError("Invalid skill data", errors)
    return fields


def validate_skill_batch(user_id: int, skills: Any) -> List[Dict[str, str]]:
    """
    Validate every item of a bulk payload.

    Returns normalized field dicts only when all items pass; otherwise
    raises with the errors of every failing item.
    """
    if isinstance(skills, (str, bytes)) or not isinstance(skills, Sequence):
        raise InvalidInputError.for_field("skills", "must be an array")

    validated = []
    errors: List[Dict[str, str]] = []
    for index, item in enumerate(skills):
        prefix = f"skills[{index}]."
        if not isinstance(item, Mapping):
            errors.append(_error(f"skills[{index}]", "must be an object"))
            continue

        owner = item.get('user_id', item.get('userId'))
        if owner is not None and owner != user_id:
            errors.append(_error(f"{prefix}userId", f"must match the bulk owner {user_id}"))

        fields, item_errors = _skill_errors(
            item.get('name'),
            item.get('category'),
            item.get('proficiency'),
            item.get('source'),
            prefix=prefix
        )
        errors.extend(item_errors)
        validated.append(fields)

    if errors:
        raise InvalidInputError("Invalid skill data", errors)
    return validated


def validate_skill_updates(updates: Any) -> Dict[str, Any]:
    if not isinstance(updates, Mapping):
        raise InvalidInputError("Skill updates must be an object")

    errors: List[Dict[str, str]] = []
    clean: Dict[str, Any] = {}
    for field, value in updates.items():
        if field not in UPDATABLE_SKILL_FIELDS:
            errors.append(_error(field, "field cannot be updated"))
        elif field == 'proficiency':
            clean[field] = _check_proficiency(value, field, errors)
        elif field == 'source':
            clean[field] = _check_text(value, field, errors, required=False) or DEFAULT_SKILL_SOURCE
        else:
            clean[field] = _check_text(value, field, errors)

    if errors:
        raise InvalidInputError("Invalid skill update", errors)
    return clean


def validate_user(username: Any, email: Any, name: Any, role: Any) -> Dict[str, str]:
    errors: List[Dict[str, str]] = []
    fields = {
        'username': _check_text(username, "username", errors),
        'email': _check_text(email, "email", errors),
        'name': _check_text(name, "name", errors),
        'role': _check_text(role, "role", errors),
    }
    if fields['email'] and '@' not in fields['email']:
        errors.append(_error("email", "must be an email address"))
    if errors:
        raise InvalidInputError("Invalid user data", errors)
    return fields


def validate_achievement(type_: Any, title: Any, description: Any, points: Any) -> Dict[str, Any]:
    errors: List[Dict[str, str]] = []
    fields = {
        'type': _check_text(type_, "type", errors),
        'title': _check_text(title, "title", errors),
        'description': _check_text(description, "description", errors, required=False),
    }
    if fields['description'] is None:
        errors.append(_error("description", "field required"))
    if errors:
        raise InvalidInputError("Invalid achievement data", errors)
    fields['points'] = check_points(points)
    return fields


def validate_comment(comment: Any) -> Optional[str]:
    if comment is None:
        return None
    if not isinstance(comment, str):
        raise InvalidInputError.for_field("comment", "must be a string")
    return comment.strip() or None
