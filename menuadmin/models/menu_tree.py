from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union


class NodeKind(str, Enum):
    LEAF = "leaf"
    CONTAINER = "container"


class OrphanPolicy(str, Enum):
    """What the assembler does with a row whose parent cannot hold it."""

    DROP = "drop"
    PROMOTE = "promote"


class AnomalyKind(str, Enum):
    ORPHAN_REFERENCE = "orphan_reference"
    LEAF_PARENT = "leaf_parent"
    DUPLICATE_MENU_ID = "duplicate_menu_id"
    UNREACHABLE = "unreachable"


@dataclass(slots=True, frozen=True)
class MenuProfileRow:
    """One flattened row of the menu-per-profile view."""

    menu_id: int
    profile_id: int
    name: str
    hierarchy_level: int
    parent_menu_id: Optional[int]
    order: int
    url: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return bool(self.url)


@dataclass(slots=True)
class LeafNode:
    """Navigable entry pointing at a screen route."""

    id: int
    label: str
    order: int
    icon: str
    route: List[str]

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LEAF


@dataclass(slots=True)
class ContainerNode:
    """Grouping entry; owns its ordered children."""

    id: int
    label: str
    order: int
    icon: str
    children: List["MenuNode"] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.CONTAINER

    def add_child(self, child: "MenuNode") -> None:
        self.children.append(child)


MenuNode = Union[LeafNode, ContainerNode]


@dataclass(slots=True, frozen=True)
class AssemblyAnomaly:
    kind: AnomalyKind
    menu_id: int
    parent_menu_id: Optional[int] = None

    def describe(self) -> str:
        if self.kind is AnomalyKind.DUPLICATE_MENU_ID:
            return f"menu {self.menu_id} appears more than once"
        if self.kind is AnomalyKind.UNREACHABLE:
            return f"menu {self.menu_id} hangs under menu {self.parent_menu_id}, which no root reaches"
        if self.kind is AnomalyKind.LEAF_PARENT:
            return f"menu {self.menu_id} declares leaf menu {self.parent_menu_id} as parent"
        return f"menu {self.menu_id} references missing parent {self.parent_menu_id}"


@dataclass(slots=True)
class MenuForest:
    """Ordered roots of an assembled menu tree plus what went wrong building it."""

    roots: List[MenuNode] = field(default_factory=list)
    anomalies: List[AssemblyAnomaly] = field(default_factory=list)

    def walk(self) -> Iterator[MenuNode]:
        """Yield every reachable node, depth first, in display order."""

        stack: List[MenuNode] = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, ContainerNode):
                stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())


__all__ = [
    "AnomalyKind",
    "AssemblyAnomaly",
    "ContainerNode",
    "LeafNode",
    "MenuForest",
    "MenuNode",
    "MenuProfileRow",
    "NodeKind",
    "OrphanPolicy",
]
