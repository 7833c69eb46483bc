from __future__ import annotations

import logging
import sqlite3
from typing import List

from menuadmin.errors import ConflictError, NotFoundError, ValidationError
from menuadmin.models.entities import Menu
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class MenuService:
    """Menu use cases: field rules plus existence of the referenced screen, module and parent."""

    def __init__(self, store: MenuAdminStore) -> None:
        self.store = store

    def create(self, menu: Menu) -> Menu:
        menu.validate()
        self._check_references(menu)
        created = self.store.create_menu(menu)
        logger.info("Menu created", extra={"menu_id": created.id, "parent_id": created.parent_id})
        return created

    def get(self, menu_id: int) -> Menu:
        menu = self.store.get_menu(menu_id)
        if menu is None:
            raise NotFoundError("Menu", menu_id)
        return menu

    def list(self) -> List[Menu]:
        return self.store.list_menus()

    def update(self, menu_id: int, menu: Menu) -> Menu:
        menu.validate()
        self._check_references(menu)
        self._check_ancestry(menu_id, menu.parent_id)
        updated = self.store.update_menu(menu_id, menu)
        if updated is None:
            raise NotFoundError("Menu", menu_id)
        logger.info("Menu updated", extra={"menu_id": menu_id})
        return updated

    def delete(self, menu_id: int) -> None:
        try:
            deleted = self.store.delete_menu(menu_id)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(f"Menu {menu_id} still has child menus") from exc
        if not deleted:
            raise NotFoundError("Menu", menu_id)
        logger.info("Menu deleted", extra={"menu_id": menu_id})

    def _check_references(self, menu: Menu) -> None:
        if menu.screen_id is not None and self.store.get_screen(menu.screen_id) is None:
            raise NotFoundError("Screen", menu.screen_id)
        if menu.module_id is not None and self.store.get_module(menu.module_id) is None:
            raise NotFoundError("Module", menu.module_id)
        if menu.parent_id is not None:
            parent = self.store.get_menu(menu.parent_id)
            if parent is None:
                raise NotFoundError("Parent menu", menu.parent_id)
            if parent.screen_id is not None:
                raise ValidationError(
                    "codMenuPadre", f"menu {parent.id} opens a screen and cannot hold child menus"
                )

    def _check_ancestry(self, menu_id: int, parent_id: int | None) -> None:
        """Reject a parent whose own parent chain leads back to ``menu_id``."""

        seen = set()
        while parent_id is not None and parent_id not in seen:
            if parent_id == menu_id:
                raise ValidationError("codMenuPadre", f"menu {menu_id} cannot be nested under its own descendant")
            seen.add(parent_id)
            ancestor = self.store.get_menu(parent_id)
            parent_id = ancestor.parent_id if ancestor else None


__all__ = ["MenuService"]
