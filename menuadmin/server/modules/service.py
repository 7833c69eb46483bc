from __future__ import annotations

import logging
import sqlite3
from typing import List

from menuadmin.errors import ConflictError, NotFoundError, ValidationError
from menuadmin.models.entities import Module
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class ModuleService:
    def __init__(self, store: MenuAdminStore) -> None:
        self.store = store

    def create(self, module: Module) -> Module:
        module.validate()
        created = self.store.create_module(module)
        logger.info("Module created", extra={"module_id": created.id})
        return created

    def get(self, module_id: int) -> Module:
        module = self.store.get_module(module_id)
        if module is None:
            raise NotFoundError("Module", module_id)
        return module

    def list(self) -> List[Module]:
        return self.store.list_modules()

    def update(self, module_id: int, module: Module) -> Module:
        module.validate()
        updated = self.store.update_module(module_id, module)
        if updated is None:
            raise NotFoundError("Module", module_id)
        logger.info("Module updated", extra={"module_id": module_id})
        return updated

    def delete(self, module_id: int) -> None:
        if module_id <= 0:
            raise ValidationError("id", f"invalid module id {module_id}")
        try:
            deleted = self.store.delete_module(module_id)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(f"Module {module_id} is still referenced by screens or menus") from exc
        if not deleted:
            raise NotFoundError("Module", module_id)
        logger.info("Module deleted", extra={"module_id": module_id})


__all__ = ["ModuleService"]
