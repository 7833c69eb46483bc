from __future__ import annotations

import logging
from typing import List, Mapping, Sequence, Set, Tuple

from menuadmin.models.menu_tree import (
    AnomalyKind,
    AssemblyAnomaly,
    ContainerNode,
    MenuNode,
    MenuProfileRow,
    OrphanPolicy,
)

logger = logging.getLogger(__name__)


class HierarchyAssembler:
    """Links built nodes under their parents and collects the roots.

    A row is a root when it has no parent or sits at hierarchy level 0. Any other
    row is attached to its parent's children when the parent is a container in the
    same row set; otherwise it is an orphan and ``orphan_policy`` decides whether
    it disappears (``drop``) or joins the roots (``promote``). Orphans are always
    reported back as anomalies. When a menu id repeats, only the last row,
    the one whose node survived in ``nodes_by_id``, is placed. Nodes hung under a
    parent that no root reaches, such as the members of a parent cycle, stay out
    of the roots under either policy and are reported as ``unreachable``.
    """

    def __init__(self, orphan_policy: OrphanPolicy = OrphanPolicy.DROP) -> None:
        self.orphan_policy = orphan_policy

    def assemble(
        self,
        rows: Sequence[MenuProfileRow],
        nodes_by_id: Mapping[int, MenuNode],
    ) -> Tuple[List[MenuNode], List[AssemblyAnomaly]]:
        roots: List[MenuNode] = []
        anomalies: List[AssemblyAnomaly] = []
        # the last row with a given menu id built its node and alone places it
        last_index = {row.menu_id: index for index, row in enumerate(rows)}
        linked: List[Tuple[MenuProfileRow, MenuNode]] = []

        for index, row in enumerate(rows):
            if last_index[row.menu_id] != index:
                continue
            current = nodes_by_id[row.menu_id]
            if row.parent_menu_id is None or row.hierarchy_level == 0:
                roots.append(current)
                continue

            parent = nodes_by_id.get(row.parent_menu_id)
            if isinstance(parent, ContainerNode):
                parent.add_child(current)
                linked.append((row, current))
                continue

            kind = AnomalyKind.ORPHAN_REFERENCE if parent is None else AnomalyKind.LEAF_PARENT
            anomaly = AssemblyAnomaly(kind, row.menu_id, row.parent_menu_id)
            anomalies.append(anomaly)
            if self.orphan_policy is OrphanPolicy.PROMOTE:
                roots.append(current)

        anomalies.extend(self._unreachable(roots, linked))
        if anomalies:
            self._log_anomalies(rows, anomalies)
        return roots, anomalies

    @staticmethod
    def _unreachable(
        roots: List[MenuNode],
        linked: List[Tuple[MenuProfileRow, MenuNode]],
    ) -> List[AssemblyAnomaly]:
        """Anomalies for nodes attached to a parent that no root reaches, as in parent cycles or under a dropped orphan."""

        reachable: Set[int] = set()
        stack: List[MenuNode] = list(roots)
        while stack:
            node = stack.pop()
            if id(node) in reachable:
                continue
            reachable.add(id(node))
            if isinstance(node, ContainerNode):
                stack.extend(node.children)
        return [
            AssemblyAnomaly(AnomalyKind.UNREACHABLE, row.menu_id, row.parent_menu_id)
            for row, node in linked
            if id(node) not in reachable
        ]

    def _log_anomalies(self, rows: Sequence[MenuProfileRow], anomalies: List[AssemblyAnomaly]) -> None:
        profile_id = rows[0].profile_id if rows else None
        action = "promoted to root" if self.orphan_policy is OrphanPolicy.PROMOTE else "dropped"
        for anomaly in anomalies:
            logger.warning(
                "Orphan menu %s",
                "dropped" if anomaly.kind is AnomalyKind.UNREACHABLE else action,
                extra={
                    "profile_id": profile_id,
                    "menu_id": anomaly.menu_id,
                    "parent_menu_id": anomaly.parent_menu_id,
                    "anomaly": anomaly.kind.value,
                },
            )


__all__ = ["HierarchyAssembler"]
