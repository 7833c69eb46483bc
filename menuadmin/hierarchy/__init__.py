"""Assembly of per-profile navigation trees from flat menu rows."""

from .builder import NodeBuilder, NodeBuilderConfig
from .assembler import HierarchyAssembler
from .orderer import sort_tree
from .pipeline import MenuTreePipeline, assemble_menu_tree

__all__ = [
    "HierarchyAssembler",
    "MenuTreePipeline",
    "NodeBuilder",
    "NodeBuilderConfig",
    "assemble_menu_tree",
    "sort_tree",
]
