"""
Menu Item Schemas for the Menu API
==================================

This module defines the Pydantic models for menu item reads and writes,
along with FIELD_RULES, the per-field constraint table every write payload
is checked against.

Field Naming:
-------------
Python attributes are snake_case; clients use the camelCase names listed in
FIELD_RULES (``priceLarge``, ``imageUrl``, ...). The business identifier is
exposed to clients as ``id``. Write models accept either spelling.

Write models are strict: numbers must be JSON numbers (ints are accepted
for floats, booleans and numeric strings are not, nor are inf/nan), and
flags must be real booleans.

Constraint Table:
-----------------
=================  =========  ============  ==========  ==============
Field              Public     Constraint    On create   Nullable
=================  =========  ============  ==========  ==============
business_id        id         len >= 3      required    no
name               name       len >= 3      required    no
description        ...        len >= 10     required    no
price              price      >= 0          required    no
price_large        priceLarge >= 0          optional    yes
category           category   len >= 2      required    no
image_url          imageUrl   -             required    no
is_popular ...     isPopular  -             false       no
is_available       ...        -             true        no
=================  =========  ============  ==========  ==============

Usage:
------
    payload = MenuItemCreate.model_validate({
        "id": "cf-001",
        "name": "Black Coffee",
        "description": "Traditional phin-filtered coffee",
        "price": 25000,
        "category": "coffee",
        "imageUrl": "/images/menu/black-coffee.jpg",
    })

    changes = MenuItemUpdate.model_validate({"price": 18000}).changes()
    # {"price": 18000.0}
"""

from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldRule(NamedTuple):
    public_name: str
    min_length: Optional[int] = None
    min_value: Optional[float] = None
    required: bool = False
    nullable: bool = False
    default: Any = None


FIELD_RULES: Dict[str, FieldRule] = {
    "business_id": FieldRule("id", min_length=3, required=True),
    "name": FieldRule("name", min_length=3, required=True),
    "description": FieldRule("description", min_length=10, required=True),
    "price": FieldRule("price", min_value=0, required=True),
    "price_large": FieldRule("priceLarge", min_value=0, nullable=True),
    "category": FieldRule("category", min_length=2, required=True),
    "image_url": FieldRule("imageUrl", required=True),
    "is_popular": FieldRule("isPopular", default=False),
    "is_best_seller": FieldRule("isBestSeller", default=False),
    "is_new": FieldRule("isNew", default=False),
    "is_available": FieldRule("isAvailable", default=True),
}

# business_id is immutable after creation
UPDATABLE_FIELDS = tuple(name for name in FIELD_RULES if name != "business_id")

NON_NULLABLE_UPDATE_FIELDS = tuple(
    name for name in UPDATABLE_FIELDS if not FIELD_RULES[name].nullable
)

PUBLIC_TO_FIELD: Dict[str, str] = {
    rule.public_name: name for name, rule in FIELD_RULES.items()
}


def rule_field(name: str, *, partial: bool = False) -> Any:
    """Build a pydantic Field carrying the FIELD_RULES constraints for ``name``."""
    rule = FIELD_RULES[name]
    kwargs: Dict[str, Any] = {"alias": rule.public_name}
    if rule.min_length is not None:
        kwargs["min_length"] = rule.min_length
    if rule.min_value is not None:
        kwargs["ge"] = rule.min_value
        kwargs["allow_inf_nan"] = False

    if partial:
        return Field(default=None, **kwargs)
    if rule.required:
        return Field(..., **kwargs)
    return Field(default=rule.default, **kwargs)


class MenuItemOut(BaseModel):
    """
    Public shape of a stored menu item.

    Can be created directly from SQLAlchemy MenuItem objects.
    """
    model_config = ConfigDict(from_attributes=True)

    storage_id: str
    business_id: str
    name: str
    description: str
    price: float
    price_large: Optional[float] = None
    category: str
    image_url: str
    is_popular: bool
    is_best_seller: bool
    is_new: bool
    is_available: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite returns naive datetimes even for timezone-aware columns
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MenuItemCreate(BaseModel):
    """
    Request model for creating a menu item.

    Every constraint comes from FIELD_RULES. Unknown keys are rejected.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    business_id: str = rule_field("business_id")
    name: str = rule_field("name")
    description: str = rule_field("description")
    price: float = rule_field("price")
    price_large: Optional[float] = rule_field("price_large")
    category: str = rule_field("category")
    image_url: str = rule_field("image_url")
    is_popular: bool = rule_field("is_popular")
    is_best_seller: bool = rule_field("is_best_seller")
    is_new: bool = rule_field("is_new")
    is_available: bool = rule_field("is_available")


class MenuItemUpdate(BaseModel):
    """
    Request model for a partial update.

    All fields are optional and only fields the caller actually sent are
    applied; ``changes()`` returns exactly that set. Sending ``null`` is
    only allowed for nullable fields (``priceLarge``), where it clears the
    value.

    Example:
        # Update only the price
        {"price": 18000}
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    name: Optional[str] = rule_field("name", partial=True)
    description: Optional[str] = rule_field("description", partial=True)
    price: Optional[float] = rule_field("price", partial=True)
    price_large: Optional[float] = rule_field("price_large", partial=True)
    category: Optional[str] = rule_field("category", partial=True)
    image_url: Optional[str] = rule_field("image_url", partial=True)
    is_popular: Optional[bool] = rule_field("is_popular", partial=True)
    is_best_seller: Optional[bool] = rule_field("is_best_seller", partial=True)
    is_new: Optional[bool] = rule_field("is_new", partial=True)
    is_available: Optional[bool] = rule_field("is_available", partial=True)

    @field_validator(*NON_NULLABLE_UPDATE_FIELDS)
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("cannot be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly provided by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
