from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from menuadmin.server.dependencies import get_store
from menuadmin.storage import MenuAdminStore
from .models import MenuRequest, MenuResponse
from .service import MenuService


router = APIRouter(prefix="/api/menu", tags=["menus"])


def get_menu_service(store: MenuAdminStore = Depends(get_store)) -> MenuService:
    return MenuService(store)


@router.post("", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
def create_menu(payload: MenuRequest, service: MenuService = Depends(get_menu_service)) -> MenuResponse:
    return MenuResponse.from_domain(service.create(payload.to_domain()))


@router.get("", response_model=List[MenuResponse])
def list_menus(service: MenuService = Depends(get_menu_service)) -> List[MenuResponse]:
    return [MenuResponse.from_domain(menu) for menu in service.list()]


@router.get("/idmenu/{menu_id}", response_model=MenuResponse)
def get_menu(menu_id: int, service: MenuService = Depends(get_menu_service)) -> MenuResponse:
    return MenuResponse.from_domain(service.get(menu_id))


@router.put("/idmenu/{menu_id}", response_model=MenuResponse)
def update_menu(
    menu_id: int,
    payload: MenuRequest,
    service: MenuService = Depends(get_menu_service),
) -> MenuResponse:
    return MenuResponse.from_domain(service.update(menu_id, payload.to_domain()))


@router.delete("/idmenu/{menu_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_menu(menu_id: int, service: MenuService = Depends(get_menu_service)) -> Response:
    service.delete(menu_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router", "get_menu_service"]
