from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from menuadmin.server.settings import Settings, get_settings
from menuadmin.storage import MenuAdminStore


@lru_cache(maxsize=8)
def get_store_for(db_path: Path) -> MenuAdminStore:
    """Return the shared store for ``db_path``, creating its schema on first use."""

    return MenuAdminStore(db_path)


def get_store(settings: Settings = Depends(get_settings)) -> MenuAdminStore:
    return get_store_for(settings.db_path)


__all__ = ["get_store", "get_store_for"]
