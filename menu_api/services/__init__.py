from .menu import MenuService

__all__ = ["MenuService"]
