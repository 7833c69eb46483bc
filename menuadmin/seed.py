"""Load fixture files of modules, screens, profiles, menus and assignments into a store.

Fixture entries carry a local ``key``; later sections reference earlier
entries by that key rather than by database id, so a fixture can be applied
to any database. Menus must be listed parents first.
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from menuadmin.models.entities import Menu, MenuProfile, Module, Profile, Screen, Status
from menuadmin.storage import MenuAdminStore

logger = logging.getLogger(__name__)


class ModuleSeed(BaseModel):
    key: str
    name: str


class ScreenSeed(BaseModel):
    key: str
    module: str
    name: str
    url: str


class ProfileSeed(BaseModel):
    key: str
    name: str


class MenuSeed(BaseModel):
    key: str
    name: str
    hierarchy: int = Field(ge=0)
    order: int = Field(ge=0)
    module: str
    icon: str = "pi pi-fw pi-bars"
    status: int = 1
    screen: Optional[str] = None
    parent: Optional[str] = None


class AssignmentSeed(BaseModel):
    profile: str
    menus: List[str] = Field(default_factory=list)


class SeedFile(BaseModel):
    modules: List[ModuleSeed] = Field(default_factory=list)
    screens: List[ScreenSeed] = Field(default_factory=list)
    profiles: List[ProfileSeed] = Field(default_factory=list)
    menus: List[MenuSeed] = Field(default_factory=list)
    assignments: List[AssignmentSeed] = Field(default_factory=list)


@dataclass(slots=True)
class SeedResult:
    modules: Dict[str, int] = field(default_factory=dict)
    screens: Dict[str, int] = field(default_factory=dict)
    profiles: Dict[str, int] = field(default_factory=dict)
    menus: Dict[str, int] = field(default_factory=dict)
    assignments: int = 0

    def summary(self) -> Dict[str, int]:
        return {
            "modules": len(self.modules),
            "screens": len(self.screens),
            "profiles": len(self.profiles),
            "menus": len(self.menus),
            "assignments": self.assignments,
        }


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported seed format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a mapping at the top level")
    return data


def load_seed_file(path: Path) -> SeedFile:
    return SeedFile.model_validate(_load_structured_file(path))


def _resolve(keys: Dict[str, int], key: str, section: str) -> int:
    try:
        return keys[key]
    except KeyError:
        raise ValueError(f"Unknown {section} key '{key}'") from None


def apply_seed(store: MenuAdminStore, seed: SeedFile) -> SeedResult:
    """Insert every entry of ``seed`` into ``store`` and return the key to id mapping."""

    result = SeedResult()

    for item in seed.modules:
        module = Module(id=None, name=item.name)
        module.validate()
        result.modules[item.key] = store.create_module(module).id

    for item in seed.screens:
        screen = Screen(
            id=None,
            module_id=_resolve(result.modules, item.module, "module"),
            name=item.name,
            url=item.url,
        )
        screen.validate()
        result.screens[item.key] = store.create_screen(screen).id

    for item in seed.profiles:
        profile = Profile(id=None, name=item.name)
        profile.validate()
        result.profiles[item.key] = store.create_profile(profile).id

    for item in seed.menus:
        menu = Menu(
            id=None,
            name=item.name,
            hierarchy=item.hierarchy,
            order=item.order,
            module_id=_resolve(result.modules, item.module, "module"),
            icon=item.icon,
            status=Status.from_code(item.status),
            screen_id=_resolve(result.screens, item.screen, "screen") if item.screen else None,
            parent_id=_resolve(result.menus, item.parent, "menu") if item.parent else None,
        )
        menu.validate()
        result.menus[item.key] = store.create_menu(menu).id

    for item in seed.assignments:
        profile_id = _resolve(result.profiles, item.profile, "profile")
        for menu_key in item.menus:
            menu_id = _resolve(result.menus, menu_key, "menu")
            store.assign_menu(MenuProfile(menu_id=menu_id, profile_id=profile_id))
            result.assignments += 1

    logger.info("Seed applied", extra=result.summary())
    return result


__all__ = [
    "SeedFile",
    "SeedResult",
    "apply_seed",
    "load_seed_file",
]
