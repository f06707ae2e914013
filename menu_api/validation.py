"""
Write payload validation.

One check function per payload type returns the full list of violated
constraints; the ``validate_*`` variants raise ``ValidationError`` instead
and hand back the parsed model. Constraints come from FIELD_RULES in
schemas/menu.py.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple, Type, TypeVar

import pydantic
from pydantic import BaseModel

from .exceptions import ValidationError
from .schemas.menu import FIELD_RULES, PUBLIC_TO_FIELD, MenuItemCreate, MenuItemUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)

IMMUTABLE_KEYS = ("id", "businessId", "business_id")


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


def _public_name(key: str) -> str:
    if key in FIELD_RULES:
        return FIELD_RULES[key].public_name
    return key


def _describe(error: Mapping[str, Any], *, partial: bool) -> Violation:
    loc = error.get("loc") or ()
    key = str(loc[0]) if loc else ""
    field = _public_name(key)
    rule = FIELD_RULES.get(PUBLIC_TO_FIELD.get(field, key))
    kind = error["type"]

    if not field:
        return Violation("", "payload must be an object")
    if kind == "missing":
        message = f"{field} is required"
    elif kind == "extra_forbidden":
        if partial and key in IMMUTABLE_KEYS:
            message = f"{field} cannot be changed after creation"
        else:
            message = f"{field} is not a recognized field"
    elif kind == "string_too_short" and rule is not None:
        message = f"{field} must be at least {rule.min_length} characters"
    elif kind == "greater_than_equal" and rule is not None:
        message = f"{field} must be greater than or equal to {rule.min_value:g}"
    elif kind == "string_type":
        message = f"{field} must be a string"
    elif kind in ("float_type", "float_parsing", "finite_number"):
        message = f"{field} must be a number"
    elif kind in ("bool_type", "bool_parsing"):
        message = f"{field} must be a boolean"
    elif kind == "value_error":
        message = f"{field} {error['ctx']['error']}"
    else:
        message = f"{field}: {error['msg']}"
    return Violation(field, message)


def _check(model: Type[ModelT], data: Any, *, partial: bool) -> Tuple[List[Violation], Any]:
    try:
        parsed = model.model_validate(data)
    except pydantic.ValidationError as exc:
        return [_describe(err, partial=partial) for err in exc.errors()], None
    return [], parsed


def check_create_payload(data: Any) -> List[Violation]:
    """Return every constraint a create payload violates (empty when valid)."""
    violations, _ = _check(MenuItemCreate, data, partial=False)
    return violations


def check_update_payload(data: Any) -> List[Violation]:
    """Return every constraint a partial update payload violates (empty when valid)."""
    violations, _ = _check(MenuItemUpdate, data, partial=True)
    return violations


def validate_create_payload(data: Any) -> MenuItemCreate:
    violations, parsed = _check(MenuItemCreate, data, partial=False)
    if violations:
        raise ValidationError(violations)
    return parsed


def validate_update_payload(data: Any) -> MenuItemUpdate:
    violations, parsed = _check(MenuItemUpdate, data, partial=True)
    if violations:
        raise ValidationError(violations)
    return parsed
