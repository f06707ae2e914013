"""GraphQL CRUD service for the beverage shop menu."""

__version__ = "1.0.0"
