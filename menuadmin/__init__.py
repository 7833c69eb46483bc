"""Menu administration backend."""

from .hierarchy import assemble_menu_tree
from .models.menu_tree import MenuForest, MenuProfileRow

__all__ = ["MenuForest", "MenuProfileRow", "assemble_menu_tree"]
