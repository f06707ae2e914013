import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from menu_api.app_factory import create_app
from menu_api.db import create_session_factory
from menu_api.models import Base
from menu_api.repository import MenuItemRepository
from menu_api.services.menu import MenuService


@pytest.fixture
def engine():
    """In-memory SQLite engine.

    Uses StaticPool so all connections share the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory):
    return MenuItemRepository(session_factory)


@pytest.fixture
def service(repository):
    return MenuService(repository)


@pytest.fixture
def client(session_factory):
    """FastAPI TestClient wired to the in-memory store."""
    app = create_app(session_factory=session_factory, graphql_ide=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def graphql(client):
    """Post a GraphQL document and return the decoded response body."""

    def execute(query, variables=None):
        resp = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert resp.status_code == 200, resp.text
        return resp.json()

    return execute


@pytest.fixture
def item_payload():
    return {
        "id": "cf-001",
        "name": "Black Iced Coffee",
        "description": "Traditional phin-filtered coffee over ice",
        "price": 15000,
        "category": "coffee",
        "imageUrl": "/images/menu/black-coffee.jpg",
    }


@pytest.fixture
def seeded(service, item_payload):
    """Seed a small menu: two coffees, one milk tea (unavailable), one juice."""
    service.create_item(item_payload)
    service.create_item({
        "id": "cf-002",
        "name": "Salted Cream Coffee",
        "description": "Robusta coffee topped with salted cream foam",
        "price": 30000,
        "priceLarge": 38000,
        "category": "coffee",
        "imageUrl": "/images/menu/salted-cream.jpg",
        "isBestSeller": True,
    })
    service.create_item({
        "id": "mt-001",
        "name": "Classic Milk Tea",
        "description": "Black tea with fresh milk and tapioca pearls",
        "price": 35000,
        "category": "milktea",
        "imageUrl": "/images/menu/milk-tea.jpg",
        "isAvailable": False,
    })
    service.create_item({
        "id": "jc-001",
        "name": "Orange Juice",
        "description": "Freshly squeezed oranges, no added sugar",
        "price": 40000,
        "category": "juice",
        "imageUrl": "/images/menu/orange-juice.jpg",
        "isNew": True,
    })
    return service
