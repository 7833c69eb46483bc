from __future__ import annotations

from operator import attrgetter
from typing import List, Optional

from menuadmin.models.menu_tree import ContainerNode, MenuNode

_by_order = attrgetter("order")


def sort_tree(nodes: Optional[List[MenuNode]]) -> None:
    """Sort every sibling list under ``nodes`` (inclusive) by display order, in place.

    ``list.sort`` is stable, so siblings sharing an order keep the order in which
    they were attached. Uses an explicit worklist so deep menus do not hit the
    recursion limit.
    """

    if not nodes:
        return
    pending: List[List[MenuNode]] = [nodes]
    while pending:
        siblings = pending.pop()
        siblings.sort(key=_by_order)
        for node in siblings:
            if isinstance(node, ContainerNode) and node.children:
                pending.append(node.children)


__all__ = ["sort_tree"]
