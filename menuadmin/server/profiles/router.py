from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from menuadmin.server.dependencies import get_store
from menuadmin.storage import MenuAdminStore
from .models import ProfileRequest, ProfileResponse
from .service import ProfileService


router = APIRouter(prefix="/api/perfil", tags=["profiles"])


def get_profile_service(store: MenuAdminStore = Depends(get_store)) -> ProfileService:
    return ProfileService(store)


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(
    payload: ProfileRequest,
    response: Response,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = service.create(payload.to_domain())
    response.headers["Location"] = f"{router.prefix}/{profile.id}"
    return ProfileResponse.from_domain(profile)


@router.get("", response_model=List[ProfileResponse])
def list_profiles(service: ProfileService = Depends(get_profile_service)) -> List[ProfileResponse]:
    return [ProfileResponse.from_domain(profile) for profile in service.list()]


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(profile_id: int, service: ProfileService = Depends(get_profile_service)) -> ProfileResponse:
    return ProfileResponse.from_domain(service.get(profile_id))


@router.put("/{profile_id}", response_model=ProfileResponse)
def update_profile(
    profile_id: int,
    payload: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_domain(service.update(profile_id, payload.to_domain()))


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(profile_id: int, service: ProfileService = Depends(get_profile_service)) -> Response:
    service.delete(profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router", "get_profile_service"]
