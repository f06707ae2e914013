import importlib

import pytest

import menu_api.config as config_mod


@pytest.fixture
def reload_config(monkeypatch):
    def reload(**env):
        for key in ("DATABASE_URL", "PORT", "CORS_ORIGINS", "GRAPHQL_IDE"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config_mod)

    yield reload
    monkeypatch.undo()
    importlib.reload(config_mod)


def test_defaults(reload_config):
    config = reload_config()
    assert config.DATABASE_URL == "sqlite:///./menu.db"
    assert config.PORT == 4000
    assert config.CORS_ORIGINS == ["http://localhost:4321"]
    assert config.GRAPHQL_IDE_ENABLED is True


def test_environment_overrides(reload_config):
    config = reload_config(
        DATABASE_URL="postgresql://menu@db/menu",
        PORT="8080",
        CORS_ORIGINS="https://shop.example, https://admin.shop.example,",
        GRAPHQL_IDE="false",
    )
    assert config.DATABASE_URL == "postgresql://menu@db/menu"
    assert config.PORT == 8080
    assert config.CORS_ORIGINS == ["https://shop.example", "https://admin.shop.example"]
    assert config.GRAPHQL_IDE_ENABLED is False
