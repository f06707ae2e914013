"""
Routes Package for the Menu API
===============================

- menu_graphql.py: strawberry schema and the router mounted at /graphql

The router is built per application by ``create_graphql_router(service)``
so the menu service is wired in explicitly at startup. The /health endpoint
lives in app_factory.py.
"""

from .menu_graphql import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
