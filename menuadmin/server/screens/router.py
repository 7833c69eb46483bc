from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from menuadmin.server.dependencies import get_store
from menuadmin.storage import MenuAdminStore
from .models import ScreenRequest, ScreenResponse
from .service import ScreenService


router = APIRouter(prefix="/api/pantalla", tags=["screens"])


def get_screen_service(store: MenuAdminStore = Depends(get_store)) -> ScreenService:
    return ScreenService(store)


@router.post("", response_model=ScreenResponse, status_code=status.HTTP_201_CREATED)
def create_screen(
    payload: ScreenRequest,
    response: Response,
    service: ScreenService = Depends(get_screen_service),
) -> ScreenResponse:
    screen = service.create(payload.to_domain())
    response.headers["Location"] = f"{router.prefix}/{screen.id}"
    return ScreenResponse.from_domain(screen)


@router.get("", response_model=List[ScreenResponse])
def list_screens(service: ScreenService = Depends(get_screen_service)) -> List[ScreenResponse]:
    return [ScreenResponse.from_domain(screen) for screen in service.list()]


@router.get("/{screen_id}", response_model=ScreenResponse)
def get_screen(screen_id: int, service: ScreenService = Depends(get_screen_service)) -> ScreenResponse:
    return ScreenResponse.from_domain(service.get(screen_id))


@router.put("/{screen_id}", response_model=ScreenResponse)
def update_screen(
    screen_id: int,
    payload: ScreenRequest,
    service: ScreenService = Depends(get_screen_service),
) -> ScreenResponse:
    return ScreenResponse.from_domain(service.update(screen_id, payload.to_domain()))


@router.delete("/{screen_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_screen(screen_id: int, service: ScreenService = Depends(get_screen_service)) -> Response:
    service.delete(screen_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router", "get_screen_service"]
