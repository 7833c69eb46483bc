from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from menuadmin.server.dependencies import get_store
from menuadmin.storage import MenuAdminStore
from .models import ModuleRequest, ModuleResponse
from .service import ModuleService


router = APIRouter(prefix="/api/modulo", tags=["modules"])


def get_module_service(store: MenuAdminStore = Depends(get_store)) -> ModuleService:
    return ModuleService(store)


@router.post("", response_model=ModuleResponse, status_code=status.HTTP_201_CREATED)
def create_module(payload: ModuleRequest, service: ModuleService = Depends(get_module_service)) -> ModuleResponse:
    return ModuleResponse.from_domain(service.create(payload.to_domain()))


@router.get("", response_model=List[ModuleResponse])
def list_modules(service: ModuleService = Depends(get_module_service)) -> List[ModuleResponse]:
    return [ModuleResponse.from_domain(module) for module in service.list()]


@router.get("/{module_id}", response_model=ModuleResponse)
def get_module(module_id: int, service: ModuleService = Depends(get_module_service)) -> ModuleResponse:
    return ModuleResponse.from_domain(service.get(module_id))


@router.put("/{module_id}", response_model=ModuleResponse)
def update_module(
    module_id: int,
    payload: ModuleRequest,
    service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    return ModuleResponse.from_domain(service.update(module_id, payload.to_domain()))


@router.delete("/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_module(module_id: int, service: ModuleService = Depends(get_module_service)) -> Response:
    service.delete(module_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router", "get_module_service"]
