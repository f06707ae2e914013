"""
Menu service: the operations exposed by the API layer.

Reads go straight to the repository. Writes run their payload through the
validation layer first, so an invalid payload never reaches the store.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..repository import MenuItemRepository
from ..schemas.menu import MenuItemOut
from ..validation import validate_create_payload, validate_update_payload

logger = logging.getLogger(__name__)


class MenuService:
    def __init__(self, repository: MenuItemRepository) -> None:
        self.repository = repository

    def list_items(
        self,
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
    ) -> List[MenuItemOut]:
        return self.repository.list_items(category=category, is_available=is_available)

    def get_item(self, business_id: str) -> MenuItemOut:
        return self.repository.get_item(business_id)

    def list_categories(self) -> List[str]:
        return self.repository.list_categories()

    def create_item(self, data: Mapping[str, Any]) -> MenuItemOut:
        payload = validate_create_payload(data)
        item = self.repository.create_item(payload)
        logger.info("Created menu item: %s (id=%s)", item.name, item.business_id)
        return item

    def update_item(self, business_id: str, data: Mapping[str, Any]) -> MenuItemOut:
        changes = validate_update_payload(data)
        item = self.repository.update_item(business_id, changes)
        logger.info(
            "Updated menu item %s fields=%s",
            business_id,
            sorted(changes.changes()) or "none",
        )
        return item

    def delete_item(self, business_id: str) -> bool:
        deleted = self.repository.delete_item(business_id)
        logger.info("Deleted menu item %s", business_id)
        return deleted

    def toggle_availability(self, business_id: str) -> MenuItemOut:
        item = self.repository.toggle_availability(business_id)
        logger.info("Menu item %s is_available=%s", business_id, item.is_available)
        return item
