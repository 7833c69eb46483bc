from __future__ import annotations

import logging
from typing import List

from menuadmin.errors import NotFoundError
from menuadmin.models.entities import Profile
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, store: MenuAdminStore) -> None:
        self.store = store

    def create(self, profile: Profile) -> Profile:
        profile.validate()
        created = self.store.create_profile(profile)
        logger.info("Profile created", extra={"profile_id": created.id})
        return created

    def get(self, profile_id: int) -> Profile:
        profile = self.store.get_profile(profile_id)
        if profile is None:
            raise NotFoundError("Profile", profile_id)
        return profile

    def list(self) -> List[Profile]:
        return self.store.list_profiles()

    def update(self, profile_id: int, profile: Profile) -> Profile:
        self.get(profile_id)
        profile.validate()
        updated = self.store.update_profile(profile_id, profile)
        if updated is None:
            raise NotFoundError("Profile", profile_id)
        logger.info("Profile updated", extra={"profile_id": profile_id})
        return updated

    def delete(self, profile_id: int) -> None:
        # menu assignments go with the profile (ON DELETE CASCADE)
        if not self.store.delete_profile(profile_id):
            raise NotFoundError("Profile", profile_id)
        logger.info("Profile deleted", extra={"profile_id": profile_id})


__all__ = ["ProfileService"]
