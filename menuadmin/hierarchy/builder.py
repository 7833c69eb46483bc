from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from menuadmin.models.menu_tree import (
    AnomalyKind,
    AssemblyAnomaly,
    ContainerNode,
    LeafNode,
    MenuNode,
    MenuProfileRow,
)

DEFAULT_LEAF_ICON = "pi pi-fw pi-desktop"
DEFAULT_CONTAINER_ICON = "pi pi-fw pi-folder"


@dataclass(slots=True, frozen=True)
class NodeBuilderConfig:
    """Presentation markers attached to each kind of node."""

    leaf_icon: str = DEFAULT_LEAF_ICON
    container_icon: str = DEFAULT_CONTAINER_ICON


class NodeBuilder:
    """Turns flat menu rows into leaf or container nodes."""

    def __init__(self, config: NodeBuilderConfig | None = None) -> None:
        self.config = config or NodeBuilderConfig()

    def build(self, row: MenuProfileRow) -> MenuNode:
        label = f"{row.menu_id}-{row.name}"
        if row.is_leaf:
            return LeafNode(
                id=row.menu_id,
                label=label,
                order=row.order,
                icon=self.config.leaf_icon,
                route=[row.url],
            )
        return ContainerNode(
            id=row.menu_id,
            label=label,
            order=row.order,
            icon=self.config.container_icon,
        )

    def build_index(
        self, rows: Iterable[MenuProfileRow]
    ) -> Tuple[Dict[int, MenuNode], List[AssemblyAnomaly]]:
        """Build one node per row keyed by menu id; a repeated id keeps the last row."""

        nodes_by_id: Dict[int, MenuNode] = {}
        anomalies: List[AssemblyAnomaly] = []
        for row in rows:
            if row.menu_id in nodes_by_id:
                anomalies.append(AssemblyAnomaly(AnomalyKind.DUPLICATE_MENU_ID, row.menu_id))
            nodes_by_id[row.menu_id] = self.build(row)
        return nodes_by_id, anomalies


__all__ = ["DEFAULT_CONTAINER_ICON", "DEFAULT_LEAF_ICON", "NodeBuilder", "NodeBuilderConfig"]
