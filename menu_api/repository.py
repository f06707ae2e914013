"""
Menu item repository.

All reads and writes against the ``menu_items`` table go through
MenuItemRepository. Each operation opens its own session and commits (or
rolls back) before returning, so results are detached MenuItemOut models
rather than live ORM rows.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import not_, text
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker

from .exceptions import ConflictError, NotFoundError, StoreUnavailableError
from .models import MenuItem, new_storage_id, utcnow
from .schemas.menu import MenuItemCreate, MenuItemOut, MenuItemUpdate

logger = logging.getLogger(__name__)


def serialize_menu_item(item: MenuItem) -> MenuItemOut:
    """Convert MenuItem model to response schema."""
    return MenuItemOut.model_validate(item)


class MenuItemRepository:
    """CRUD access to menu items keyed by business identifier."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except (OperationalError, InterfaceError) as exc:
            session.rollback()
            logger.error("Menu store unavailable: %s", exc)
            raise StoreUnavailableError() from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @staticmethod
    def _find(session: Session, business_id: str) -> Optional[MenuItem]:
        return session.query(MenuItem).filter(MenuItem.business_id == business_id).first()

    def ping(self) -> None:
        with self._session() as session:
            session.execute(text("SELECT 1"))

    def list_items(
        self,
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
    ) -> List[MenuItemOut]:
        with self._session() as session:
            query = session.query(MenuItem)
            if category:
                query = query.filter(MenuItem.category == category)
            if is_available is not None:
                query = query.filter(MenuItem.is_available == is_available)
            return [serialize_menu_item(m) for m in query.all()]

    def get_item(self, business_id: str) -> MenuItemOut:
        with self._session() as session:
            item = self._find(session, business_id)
            if item is None:
                raise NotFoundError(business_id)
            return serialize_menu_item(item)

    def list_categories(self) -> List[str]:
        with self._session() as session:
            rows = session.query(MenuItem.category).distinct().all()
            return [category for (category,) in rows]

    def create_item(self, payload: MenuItemCreate) -> MenuItemOut:
        now = utcnow()
        item = MenuItem(
            storage_id=new_storage_id(),
            created_at=now,
            updated_at=now,
            **payload.model_dump(),
        )
        try:
            with self._session() as session:
                session.add(item)
                session.flush()
                created = serialize_menu_item(item)
        except IntegrityError as exc:
            logger.info("Rejected duplicate menu item id %s", payload.business_id)
            raise ConflictError(payload.business_id) from exc
        return created

    def update_item(self, business_id: str, changes: MenuItemUpdate) -> MenuItemOut:
        with self._session() as session:
            item = self._find(session, business_id)
            if item is None:
                raise NotFoundError(business_id)

            for field, value in changes.changes().items():
                setattr(item, field, value)
            item.updated_at = utcnow()

            session.flush()
            return serialize_menu_item(item)

    def delete_item(self, business_id: str) -> bool:
        with self._session() as session:
            deleted = (
                session.query(MenuItem)
                .filter(MenuItem.business_id == business_id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                raise NotFoundError(business_id)
        return True

    def toggle_availability(self, business_id: str) -> MenuItemOut:
        # Single conditional UPDATE so concurrent toggles cannot lose a flip
        with self._session() as session:
            matched = (
                session.query(MenuItem)
                .filter(MenuItem.business_id == business_id)
                .update(
                    {
                        MenuItem.is_available: not_(MenuItem.is_available),
                        MenuItem.updated_at: utcnow(),
                    },
                    synchronize_session=False,
                )
            )
            if matched == 0:
                raise NotFoundError(business_id)
            item = self._find(session, business_id)
            return serialize_menu_item(item)
