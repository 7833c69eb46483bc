from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from menuadmin.models.entities import MenuProfile
from menuadmin.models.menu_tree import AssemblyAnomaly, ContainerNode, MenuForest, MenuNode


class MenuProfileRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    menu_id: int = Field(alias="menuId", gt=0)
    profile_id: int = Field(alias="perfilId", gt=0)

    def to_domain(self) -> MenuProfile:
        return MenuProfile(menu_id=self.menu_id, profile_id=self.profile_id)


class MenuProfileResponse(BaseModel):
    menu_id: int = Field(serialization_alias="menuId")
    profile_id: int = Field(serialization_alias="perfilId")

    @classmethod
    def from_domain(cls, assignment: MenuProfile) -> "MenuProfileResponse":
        return cls(menu_id=assignment.menu_id, profile_id=assignment.profile_id)


class MenuTreeItem(BaseModel):
    """One navigation entry in the shape the frontend menu component consumes.

    Leaves carry ``routerLink`` and no ``items``; containers carry ``items``
    (possibly empty) and no ``routerLink``. Routes serialize with
    ``response_model_exclude_none`` so the absent key is dropped, not nulled.
    """

    id: int = Field(serialization_alias="codigo")
    label: str
    router_link: Optional[List[str]] = Field(default=None, serialization_alias="routerLink")
    order: int = Field(serialization_alias="orden")
    icon: str
    items: Optional[List["MenuTreeItem"]] = None

    @classmethod
    def from_node(cls, node: MenuNode) -> "MenuTreeItem":
        if isinstance(node, ContainerNode):
            return cls(
                id=node.id,
                label=node.label,
                order=node.order,
                icon=node.icon,
                items=[cls.from_node(child) for child in node.children],
            )
        return cls(
            id=node.id,
            label=node.label,
            router_link=list(node.route),
            order=node.order,
            icon=node.icon,
        )


class AnomalyItem(BaseModel):
    kind: str
    menu_id: int = Field(serialization_alias="menuId")
    parent_menu_id: Optional[int] = Field(default=None, serialization_alias="parentMenuId")
    message: str

    @classmethod
    def from_domain(cls, anomaly: AssemblyAnomaly) -> "AnomalyItem":
        return cls(
            kind=anomaly.kind.value,
            menu_id=anomaly.menu_id,
            parent_menu_id=anomaly.parent_menu_id,
            message=anomaly.describe(),
        )


class MenuTreeDiagnostics(BaseModel):
    items: List[MenuTreeItem]
    anomalies: List[AnomalyItem]

    @classmethod
    def from_forest(cls, forest: MenuForest) -> "MenuTreeDiagnostics":
        return cls(
            items=[MenuTreeItem.from_node(node) for node in forest.roots],
            anomalies=[AnomalyItem.from_domain(anomaly) for anomaly in forest.anomalies],
        )


MenuTreeItem.model_rebuild()


__all__ = [
    "AnomalyItem",
    "MenuProfileRequest",
    "MenuProfileResponse",
    "MenuTreeDiagnostics",
    "MenuTreeItem",
]
