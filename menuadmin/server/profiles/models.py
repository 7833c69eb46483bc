from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from menuadmin.models.entities import Profile


class ProfileRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nombre")

    def to_domain(self) -> Profile:
        return Profile(id=None, name=self.name)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(serialization_alias="nombre")

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(id=profile.id, name=profile.name)


__all__ = ["ProfileRequest", "ProfileResponse"]
