from __future__ import annotations

import logging
from typing import Iterable, List

from menuadmin.hierarchy.assembler import HierarchyAssembler
from menuadmin.hierarchy.builder import NodeBuilder
from menuadmin.hierarchy.orderer import sort_tree
from menuadmin.models.menu_tree import MenuForest, MenuProfileRow, OrphanPolicy

logger = logging.getLogger(__name__)


class MenuTreePipeline:
    """Coordinates node building, parent linking and sibling ordering for one row set."""

    def __init__(
        self,
        builder: NodeBuilder | None = None,
        assembler: HierarchyAssembler | None = None,
    ) -> None:
        self.builder = builder or NodeBuilder()
        self.assembler = assembler or HierarchyAssembler()

    def run(self, rows: Iterable[MenuProfileRow]) -> MenuForest:
        ordered_rows: List[MenuProfileRow] = list(rows)
        nodes_by_id, duplicates = self.builder.build_index(ordered_rows)
        for anomaly in duplicates:
            logger.warning("Duplicate menu id in row set", extra={"menu_id": anomaly.menu_id})

        roots, orphans = self.assembler.assemble(ordered_rows, nodes_by_id)
        sort_tree(roots)
        return MenuForest(roots=roots, anomalies=duplicates + orphans)


def assemble_menu_tree(
    rows: Iterable[MenuProfileRow],
    *,
    builder: NodeBuilder | None = None,
    orphan_policy: OrphanPolicy = OrphanPolicy.DROP,
) -> MenuForest:
    """Convenience wrapper: build, link and order ``rows`` into a ``MenuForest``."""

    pipeline = MenuTreePipeline(builder=builder, assembler=HierarchyAssembler(orphan_policy))
    return pipeline.run(rows)


__all__ = ["MenuTreePipeline", "assemble_menu_tree"]
