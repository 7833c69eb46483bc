"""Domain entities and menu-tree value types."""

from .entities import Menu, MenuProfile, Module, Profile, Screen, Status
from .menu_tree import (
    AnomalyKind,
    AssemblyAnomaly,
    ContainerNode,
    LeafNode,
    MenuForest,
    MenuNode,
    MenuProfileRow,
    NodeKind,
    OrphanPolicy,
)

__all__ = [
    "AnomalyKind",
    "AssemblyAnomaly",
    "ContainerNode",
    "LeafNode",
    "Menu",
    "MenuForest",
    "MenuNode",
    "MenuProfile",
    "MenuProfileRow",
    "Module",
    "NodeKind",
    "OrphanPolicy",
    "Profile",
    "Screen",
    "Status",
]
