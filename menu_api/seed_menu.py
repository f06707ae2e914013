"""
Bulk import of menu items from a JSON file.

Usage:
    python -m menu_api.seed_menu items.json

The file holds a JSON array of create payloads using the public field
names (``id``, ``name``, ``description``, ``price``, ``category``,
``imageUrl``, ...). Every item goes through MenuService, so it is
validated exactly like a createMenuItem mutation. Items whose id already
exists are skipped.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping

from .exceptions import ConflictError, ValidationError
from .services.menu import MenuService

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    created: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"created={len(self.created)} skipped={len(self.skipped)} "
            f"invalid={len(self.invalid)}"
        )


def _label(data: Any, index: int) -> str:
    if isinstance(data, Mapping):
        for key in ("id", "business_id"):
            if data.get(key) is not None:
                return str(data[key])
    return f"#{index}"


def seed_menu(service: MenuService, items: Iterable[Mapping[str, Any]]) -> SeedReport:
    report = SeedReport()
    for index, data in enumerate(items):
        label = _label(data, index)
        try:
            service.create_item(data)
        except ConflictError:
            report.skipped.append(label)
        except ValidationError as exc:
            logger.warning("Skipping invalid menu item %s: %s", label, exc.message)
            report.invalid.append(label)
        else:
            report.created.append(label)
    return report


def load_items(path: str) -> List[Mapping[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of menu items")
    return data


def main(argv: List[str] = None) -> int:
    from dotenv import load_dotenv
    load_dotenv()

    from .db import create_session_factory, create_store_engine, init_db
    from .logging_config import setup_logging
    from .repository import MenuItemRepository

    parser = argparse.ArgumentParser(description="Import menu items from a JSON file")
    parser.add_argument("path", help="JSON array of menu item payloads")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    args = parser.parse_args(argv)

    setup_logging()
    engine = create_store_engine(args.database_url)
    init_db(engine)
    service = MenuService(MenuItemRepository(create_session_factory(engine)))

    report = seed_menu(service, load_items(args.path))
    logger.info("Menu import finished: %s", report.summary())
    return 1 if report.invalid else 0


if __name__ == "__main__":
    sys.exit(main())
