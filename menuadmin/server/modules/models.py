from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from menuadmin.models.entities import Module


class ModuleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nombre")

    def to_domain(self) -> Module:
        return Module(id=None, name=self.name)


class ModuleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(serialization_alias="nombre")

    @classmethod
    def from_domain(cls, module: Module) -> "ModuleResponse":
        return cls(id=module.id, name=module.name)


__all__ = ["ModuleRequest", "ModuleResponse"]
