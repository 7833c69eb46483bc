import pytest
from pydantic import ValidationError

from menuadmin.hierarchy.builder import DEFAULT_LEAF_ICON
from menuadmin.models.menu_tree import OrphanPolicy
from menuadmin.server.settings import DEFAULT_CORS_ORIGINS, Settings


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MENU_DB_PATH", str(tmp_path / "env.db"))
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test ,")
    monkeypatch.setenv("MENU_ORPHAN_POLICY", " Promote ")
    monkeypatch.setenv("MENU_CONTAINER_ICON", "pi pi-box")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = Settings()

    assert settings.db_path == tmp_path / "env.db"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.orphan_policy is OrphanPolicy.PROMOTE
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    config = settings.node_builder_config()
    assert config.container_icon == "pi pi-box"
    assert config.leaf_icon == DEFAULT_LEAF_ICON


def test_settings_defaults(monkeypatch):
    for name in ("CORS_ORIGINS", "MENU_ORPHAN_POLICY", "LOG_LEVEL", "LOG_JSON", "MENU_LEAF_ICON"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.orphan_policy is OrphanPolicy.DROP
    assert settings.log_level == "INFO"
    assert settings.log_json is True


def test_settings_reject_bad_values(monkeypatch):
    monkeypatch.setenv("MENU_ORPHAN_POLICY", "ignore")
    with pytest.raises(ValidationError):
        Settings()
    monkeypatch.delenv("MENU_ORPHAN_POLICY")

    with pytest.raises(ValidationError):
        Settings(log_level="verbose")
    with pytest.raises(ValidationError):
        Settings(leaf_icon="  ")
