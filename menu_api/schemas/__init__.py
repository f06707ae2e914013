"""
Pydantic schemas for the menu API.

- menu.py: MenuItemOut (public shape), MenuItemCreate / MenuItemUpdate
  (write payloads) and FIELD_RULES, the per-field constraint table.
"""

from .menu import (
    FIELD_RULES,
    FieldRule,
    MenuItemCreate,
    MenuItemOut,
    MenuItemUpdate,
)

__all__ = [
    "FIELD_RULES",
    "FieldRule",
    "MenuItemCreate",
    "MenuItemOut",
    "MenuItemUpdate",
]
