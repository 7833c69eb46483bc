from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from menuadmin.server.dependencies import get_store
from menuadmin.server.settings import Settings, get_settings
from menuadmin.storage import MenuAdminStore
from .models import MenuProfileRequest, MenuProfileResponse, MenuTreeDiagnostics, MenuTreeItem
from .service import MenuProfileService


router = APIRouter(prefix="/api/menu-perfil", tags=["menu-profiles"])


def get_menu_profile_service(
    store: MenuAdminStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> MenuProfileService:
    return MenuProfileService(store, settings)


@router.post("", response_model=MenuProfileResponse, status_code=status.HTTP_201_CREATED)
def assign_menu(
    payload: MenuProfileRequest,
    service: MenuProfileService = Depends(get_menu_profile_service),
) -> MenuProfileResponse:
    return MenuProfileResponse.from_domain(service.assign(payload.to_domain()))


@router.get("/perfil/{profile_id}", response_model=List[MenuProfileResponse])
def list_assignments(
    profile_id: int,
    service: MenuProfileService = Depends(get_menu_profile_service),
) -> List[MenuProfileResponse]:
    return [MenuProfileResponse.from_domain(item) for item in service.list_for_profile(profile_id)]


@router.delete("/menu/{menu_id}/perfil/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_assignment(
    menu_id: int,
    profile_id: int,
    service: MenuProfileService = Depends(get_menu_profile_service),
) -> Response:
    service.remove(menu_id, profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/jerarquico/perfil/{profile_id}",
    response_model=List[MenuTreeItem],
    response_model_exclude_none=True,
)
def menu_tree(
    profile_id: int,
    service: MenuProfileService = Depends(get_menu_profile_service),
) -> List[MenuTreeItem]:
    forest = service.menu_tree(profile_id)
    return [MenuTreeItem.from_node(node) for node in forest.roots]


@router.get(
    "/jerarquico/perfil/{profile_id}/diagnostico",
    response_model=MenuTreeDiagnostics,
    response_model_exclude_none=True,
)
def menu_tree_diagnostics(
    profile_id: int,
    service: MenuProfileService = Depends(get_menu_profile_service),
) -> MenuTreeDiagnostics:
    return MenuTreeDiagnostics.from_forest(service.menu_tree(profile_id))


__all__ = ["router", "get_menu_profile_service"]
