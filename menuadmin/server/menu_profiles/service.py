from __future__ import annotations

import logging
from typing import List

from menuadmin.errors import ConflictError, NotFoundError
from menuadmin.hierarchy import HierarchyAssembler, MenuTreePipeline, NodeBuilder
from menuadmin.models.entities import MenuProfile
from menuadmin.models.menu_tree import MenuForest
from menuadmin.server.settings import Settings
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class MenuProfileService:
    """Menu-to-profile assignments and the per-profile navigation tree."""

    def __init__(self, store: MenuAdminStore, settings: Settings) -> None:
        self.store = store
        self.pipeline = MenuTreePipeline(
            builder=NodeBuilder(settings.node_builder_config()),
            assembler=HierarchyAssembler(settings.orphan_policy),
        )

    def assign(self, assignment: MenuProfile) -> MenuProfile:
        if self.store.get_menu(assignment.menu_id) is None:
            raise NotFoundError("Menu", assignment.menu_id)
        if self.store.get_profile(assignment.profile_id) is None:
            raise NotFoundError("Profile", assignment.profile_id)
        if self.store.get_assignment(assignment.menu_id, assignment.profile_id) is not None:
            raise ConflictError(
                f"Menu {assignment.menu_id} is already assigned to profile {assignment.profile_id}"
            )
        created = self.store.assign_menu(assignment)
        logger.info(
            "Menu assigned to profile",
            extra={"menu_id": created.menu_id, "profile_id": created.profile_id},
        )
        return created

    def list_for_profile(self, profile_id: int) -> List[MenuProfile]:
        return self.store.list_assignments(profile_id)

    def remove(self, menu_id: int, profile_id: int) -> None:
        if not self.store.remove_assignment(menu_id, profile_id):
            raise NotFoundError("Menu profile assignment", f"{menu_id}/{profile_id}")
        logger.info("Menu removed from profile", extra={"menu_id": menu_id, "profile_id": profile_id})

    def menu_tree(self, profile_id: int) -> MenuForest:
        # unknown profiles simply have no rows and yield an empty forest
        rows = self.store.list_menu_profile_rows(profile_id)
        forest = self.pipeline.run(rows)
        logger.debug(
            "Menu tree assembled",
            extra={"profile_id": profile_id, "rows": len(rows), "nodes": forest.node_count()},
        )
        return forest


__all__ = ["MenuProfileService"]
