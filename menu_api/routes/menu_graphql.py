"""
GraphQL Routes for the Menu API
===============================

This module defines the GraphQL schema (strawberry) and builds the router
mounted at /graphql.

Queries:
--------
- menuItems(category, isAvailable): List menu items, optionally filtered
- menuItem(id): Get one menu item by business id
- categories: Distinct categories currently on the menu

Mutations:
----------
- createMenuItem(input): Create a menu item
- updateMenuItem(id, input): Partially update a menu item
- deleteMenuItem(id): Delete a menu item, returns true
- toggleMenuItemAvailability(id): Flip isAvailable, returns the item

Error Handling:
---------------
Domain errors are returned as GraphQL errors with ``extensions.code``:
- BAD_USER_INPUT: payload failed validation (``extensions.violations``)
- NOT_FOUND: no item with that id
- CONFLICT: an item with that id already exists
- STORE_UNAVAILABLE: the database could not be reached

Usage:
------
    mutation {
      updateMenuItem(id: "cf-001", input: {price: 18000, isAvailable: false}) {
        id
        name
        price
        isAvailable
      }
    }
"""

import dataclasses
import logging
from datetime import datetime
from typing import Annotated, Any, Callable, Dict, List, Optional

import strawberry
from graphql import GraphQLError
from starlette.concurrency import run_in_threadpool
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ..exceptions import MenuError, NotFoundError, ValidationError
from ..schemas.menu import MenuItemOut
from ..services.menu import MenuService

logger = logging.getLogger(__name__)

BusinessId = Annotated[str, strawberry.argument(name="id")]


# =============================================================================
# Types
# =============================================================================

@strawberry.type(name="MenuItem")
class MenuItemType:
    storage_id: strawberry.ID = strawberry.field(name="_id")
    business_id: str = strawberry.field(name="id")
    name: str
    description: str
    price: float
    price_large: Optional[float]
    category: str
    image_url: str
    is_popular: bool
    is_best_seller: bool
    is_new: bool
    is_available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, item: MenuItemOut) -> "MenuItemType":
        return cls(**item.model_dump())


@strawberry.input
class CreateMenuItemInput:
    business_id: str = strawberry.field(name="id")
    name: str
    description: str
    price: float
    category: str
    image_url: str
    price_large: Optional[float] = strawberry.UNSET
    is_popular: Optional[bool] = strawberry.UNSET
    is_best_seller: Optional[bool] = strawberry.UNSET
    is_new: Optional[bool] = strawberry.UNSET
    is_available: Optional[bool] = strawberry.UNSET


@strawberry.input
class UpdateMenuItemInput:
    name: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    price_large: Optional[float] = strawberry.UNSET
    category: Optional[str] = strawberry.UNSET
    image_url: Optional[str] = strawberry.UNSET
    is_popular: Optional[bool] = strawberry.UNSET
    is_best_seller: Optional[bool] = strawberry.UNSET
    is_new: Optional[bool] = strawberry.UNSET
    is_available: Optional[bool] = strawberry.UNSET


# =============================================================================
# Helper Functions
# =============================================================================

def input_to_payload(data: Any) -> Dict[str, Any]:
    """Fields the client actually sent; omitted fields stay out of the payload."""
    payload = {}
    for field in dataclasses.fields(data):
        value = getattr(data, field.name)
        if value is not strawberry.UNSET:
            payload[field.name] = value
    return payload


def to_graphql_error(exc: MenuError) -> GraphQLError:
    extensions: Dict[str, Any] = {"code": exc.code}
    if isinstance(exc, ValidationError):
        extensions["violations"] = [v.to_dict() for v in exc.violations]
    return GraphQLError(exc.message, extensions=extensions, original_error=exc)


async def call_service(info: Info, operation: Callable[..., Any], *args: Any) -> Any:
    service: MenuService = info.context["service"]
    try:
        return await run_in_threadpool(operation, service, *args)
    except NotFoundError as exc:
        logger.debug("%s", exc.message)
        raise to_graphql_error(exc) from exc
    except MenuError as exc:
        logger.warning("%s failed: %s", operation.__name__, exc.message)
        raise to_graphql_error(exc) from exc


# =============================================================================
# Queries and Mutations
# =============================================================================

@strawberry.type
class Query:
    @strawberry.field(description="List menu items, optionally filtered by category and availability")
    async def menu_items(
        self,
        info: Info,
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
    ) -> List[MenuItemType]:
        items = await call_service(info, MenuService.list_items, category, is_available)
        return [MenuItemType.from_record(item) for item in items]

    @strawberry.field(description="Get one menu item by its business id")
    async def menu_item(self, info: Info, business_id: BusinessId) -> Optional[MenuItemType]:
        item = await call_service(info, MenuService.get_item, business_id)
        return MenuItemType.from_record(item)

    @strawberry.field(description="Distinct categories currently on the menu")
    async def categories(self, info: Info) -> List[str]:
        return await call_service(info, MenuService.list_categories)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_menu_item(
        self,
        info: Info,
        payload: Annotated[CreateMenuItemInput, strawberry.argument(name="input")],
    ) -> MenuItemType:
        item = await call_service(info, MenuService.create_item, input_to_payload(payload))
        return MenuItemType.from_record(item)

    @strawberry.mutation
    async def update_menu_item(
        self,
        info: Info,
        business_id: BusinessId,
        payload: Annotated[UpdateMenuItemInput, strawberry.argument(name="input")],
    ) -> MenuItemType:
        item = await call_service(
            info, MenuService.update_item, business_id, input_to_payload(payload)
        )
        return MenuItemType.from_record(item)

    @strawberry.mutation
    async def delete_menu_item(self, info: Info, business_id: BusinessId) -> bool:
        return await call_service(info, MenuService.delete_item, business_id)

    @strawberry.mutation
    async def toggle_menu_item_availability(
        self, info: Info, business_id: BusinessId
    ) -> MenuItemType:
        item = await call_service(info, MenuService.toggle_availability, business_id)
        return MenuItemType.from_record(item)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(service: MenuService, graphql_ide: bool = True) -> GraphQLRouter:
    """Build the /graphql router bound to ``service``."""

    async def get_context() -> Dict[str, Any]:
        return {"service": service}

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphql_ide else None,
    )
