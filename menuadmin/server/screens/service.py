from __future__ import annotations

import logging
import sqlite3
from typing import List

from menuadmin.errors import ConflictError, NotFoundError
from menuadmin.models.entities import Screen
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class ScreenService:
    def __init__(self, store: MenuAdminStore) -> None:
        self.store = store

    def create(self, screen: Screen) -> Screen:
        screen.validate()
        self._require_module(screen.module_id)
        created = self.store.create_screen(screen)
        logger.info("Screen created", extra={"screen_id": created.id, "url": created.url})
        return created

    def get(self, screen_id: int) -> Screen:
        screen = self.store.get_screen(screen_id)
        if screen is None:
            raise NotFoundError("Screen", screen_id)
        return screen

    def list(self) -> List[Screen]:
        return self.store.list_screens()

    def update(self, screen_id: int, screen: Screen) -> Screen:
        self.get(screen_id)
        screen.validate()
        self._require_module(screen.module_id)
        updated = self.store.update_screen(screen_id, screen)
        if updated is None:
            raise NotFoundError("Screen", screen_id)
        logger.info("Screen updated", extra={"screen_id": screen_id})
        return updated

    def delete(self, screen_id: int) -> None:
        try:
            deleted = self.store.delete_screen(screen_id)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(f"Screen {screen_id} is still linked to a menu") from exc
        if not deleted:
            raise NotFoundError("Screen", screen_id)
        logger.info("Screen deleted", extra={"screen_id": screen_id})

    def _require_module(self, module_id: int | None) -> None:
        if module_id is not None and self.store.get_module(module_id) is None:
            raise NotFoundError("Module", module_id)


__all__ = ["ScreenService"]
