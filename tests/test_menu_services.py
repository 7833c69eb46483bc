from __future__ import annotations

import pytest

from menuadmin.errors import ConflictError, NotFoundError, ValidationError
from menuadmin.models.entities import Menu, MenuProfile, Module, Profile, Screen, Status
from menuadmin.models.menu_tree import AnomalyKind, ContainerNode
from menuadmin.server.menu_profiles.service import MenuProfileService
from menuadmin.server.menus.service import MenuService
from menuadmin.server.modules.service import ModuleService
from menuadmin.server.profiles.service import ProfileService
from menuadmin.server.screens.service import ScreenService
from menuadmin.server.settings import Settings
from menuadmin.storage import MenuAdminStore


def _menu(name="Seguridad", hierarchy=0, order=1, module_id=1, screen_id=None, parent_id=None):
    return Menu(
        id=None,
        name=name,
        hierarchy=hierarchy,
        order=order,
        module_id=module_id,
        icon="pi pi-lock",
        status=Status.ACTIVE,
        screen_id=screen_id,
        parent_id=parent_id,
    )


@pytest.fixture()
def store(tmp_path):
    return MenuAdminStore(tmp_path / "menus.db")


def test_module_service_errors(store):
    service = ModuleService(store)
    module = service.create(Module(id=None, name="Seguridad"))

    with pytest.raises(ValidationError):
        service.create(Module(id=None, name=" "))
    with pytest.raises(NotFoundError) as excinfo:
        service.get(404)
    assert str(excinfo.value) == "Module with ID 404 not found"
    with pytest.raises(ValidationError):
        service.delete(0)

    ScreenService(store).create(Screen(id=None, module_id=module.id, name="Usuarios", url="/u"))
    with pytest.raises(ConflictError):
        service.delete(module.id)


def test_screen_service_requires_existing_module(store):
    service = ScreenService(store)

    with pytest.raises(NotFoundError) as excinfo:
        service.create(Screen(id=None, module_id=5, name="Usuarios", url="/u"))
    assert excinfo.value.entity == "Module"
    with pytest.raises(NotFoundError):
        service.update(3, Screen(id=None, module_id=5, name="Usuarios", url="/u"))


def test_menu_service_checks_references(store):
    module = ModuleService(store).create(Module(id=None, name="Seguridad"))
    screen = ScreenService(store).create(Screen(id=None, module_id=module.id, name="Usuarios", url="/u"))
    service = MenuService(store)

    with pytest.raises(NotFoundError):
        service.create(_menu(module_id=99))
    parent = service.create(_menu(module_id=module.id))
    with pytest.raises(NotFoundError) as excinfo:
        service.create(_menu("Usuarios", 1, 1, module.id, screen_id=screen.id, parent_id=77))
    assert excinfo.value.entity == "Parent menu"
    with pytest.raises(NotFoundError):
        service.create(_menu("Usuarios", 1, 1, module.id, screen_id=88, parent_id=parent.id))

    child = service.create(_menu("Usuarios", 1, 1, module.id, screen_id=screen.id, parent_id=parent.id))
    assert service.get(child.id).parent_id == parent.id

    with pytest.raises(ValidationError):
        service.update(parent.id, _menu(module_id=module.id, parent_id=parent.id))
    with pytest.raises(NotFoundError):
        service.update(500, _menu(module_id=module.id))
    with pytest.raises(ConflictError):
        service.delete(parent.id)

    service.delete(child.id)
    service.delete(parent.id)
    with pytest.raises(NotFoundError):
        service.delete(parent.id)


def test_menu_profile_service_assignments(store):
    module = store.create_module(Module(id=None, name="Seguridad"))
    menu = store.create_menu(_menu(module_id=module.id))
    profile = ProfileService(store).create(Profile(id=None, name="Administrador"))
    service = MenuProfileService(store, Settings(db_path=store.db_path))

    with pytest.raises(NotFoundError):
        service.assign(MenuProfile(menu_id=99, profile_id=profile.id))
    with pytest.raises(NotFoundError):
        service.assign(MenuProfile(menu_id=menu.id, profile_id=99))

    service.assign(MenuProfile(menu_id=menu.id, profile_id=profile.id))
    with pytest.raises(ConflictError):
        service.assign(MenuProfile(menu_id=menu.id, profile_id=profile.id))
    assert service.list_for_profile(profile.id) == [MenuProfile(menu_id=menu.id, profile_id=profile.id)]

    service.remove(menu.id, profile.id)
    with pytest.raises(NotFoundError):
        service.remove(menu.id, profile.id)


def test_menu_tree_uses_configured_policy_and_icons(store):
    module = store.create_module(Module(id=None, name="Seguridad"))
    screen = store.create_screen(Screen(id=None, module_id=module.id, name="Usuarios", url="/u"))
    profile = store.create_profile(Profile(id=None, name="Administrador"))
    root = store.create_menu(_menu(module_id=module.id))
    leaf = store.create_menu(_menu("Usuarios", 1, 1, module.id, screen_id=screen.id, parent_id=root.id))
    # assigned without its parent, so the leaf is an orphan for this profile
    store.assign_menu(MenuProfile(menu_id=leaf.id, profile_id=profile.id))

    dropping = MenuProfileService(store, Settings(db_path=store.db_path))
    forest = dropping.menu_tree(profile.id)
    assert forest.roots == []
    assert [anomaly.kind for anomaly in forest.anomalies] == [AnomalyKind.ORPHAN_REFERENCE]

    promoting = MenuProfileService(
        store,
        Settings(db_path=store.db_path, orphan_policy="PROMOTE", leaf_icon="pi pi-file"),
    )
    forest = promoting.menu_tree(profile.id)
    assert [node.id for node in forest.roots] == [leaf.id]
    assert forest.roots[0].icon == "pi pi-file"

    store.assign_menu(MenuProfile(menu_id=root.id, profile_id=profile.id))
    forest = dropping.menu_tree(profile.id)
    assert isinstance(forest.roots[0], ContainerNode)
    assert [child.id for child in forest.roots[0].children] == [leaf.id]
    assert dropping.menu_tree(12345).roots == []


def test_menu_service_rejects_cycles_and_leaf_parents(store):
    module = store.create_module(Module(id=None, name="Seguridad"))
    screen = store.create_screen(Screen(id=None, module_id=module.id, name="Usuarios", url="/u"))
    service = MenuService(store)
    top = service.create(_menu("Raíz", 0, 0, module.id))
    middle = service.create(_menu("Medio", 1, 0, module.id, parent_id=top.id))
    bottom = service.create(_menu("Fondo", 2, 0, module.id, parent_id=middle.id))
    leaf = service.create(_menu("Usuarios", 1, 1, module.id, screen_id=screen.id, parent_id=top.id))

    with pytest.raises(ValidationError) as excinfo:
        service.update(top.id, _menu("Raíz", 3, 0, module.id, parent_id=bottom.id))
    assert excinfo.value.field == "codMenuPadre"
    assert store.get_menu(top.id).parent_id is None

    with pytest.raises(ValidationError):
        service.create(_menu("Bajo hoja", 2, 0, module.id, parent_id=leaf.id))

    moved = service.update(bottom.id, _menu("Fondo", 1, 0, module.id, parent_id=top.id))
    assert moved.parent_id == top.id
