import pytest

from menuadmin.errors import ValidationError
from menuadmin.models import Menu, MenuProfileRow, Module, Screen, Status


def _menu(**overrides):
    values = dict(
        id=None,
        name="Usuarios",
        hierarchy=1,
        order=1,
        module_id=1,
        icon="pi pi-user",
        status=Status.ACTIVE,
        screen_id=None,
        parent_id=None,
    )
    values.update(overrides)
    return Menu(**values)


def test_status_codes_and_descriptions():
    assert Status.from_code(1) is Status.ACTIVE
    assert Status.from_code(0).description == "Inactivo"
    assert Status.ACTIVE.description == "Activo"
    with pytest.raises(ValueError):
        Status.from_code(3)
    with pytest.raises(ValueError):
        Status.from_code(None)


def test_menu_validation_rules():
    _menu().validate()
    _menu(screen_id=3, parent_id=1).validate()

    with pytest.raises(ValidationError) as excinfo:
        _menu(name="  ").validate()
    assert excinfo.value.field == "nombre"
    assert str(excinfo.value).startswith("Validation failed on 'nombre'")

    with pytest.raises(ValidationError):
        _menu(hierarchy=-1).validate()
    with pytest.raises(ValidationError):
        _menu(order=-2).validate()
    with pytest.raises(ValidationError) as excinfo:
        _menu(screen_id=3).validate()
    assert excinfo.value.field == "codMenuPadre"


def test_screen_and_module_validation():
    Screen(id=None, module_id=1, name="Usuarios", url="/u").validate()
    with pytest.raises(ValidationError):
        Screen(id=None, module_id=1, name="Usuarios", url="").validate()
    with pytest.raises(ValidationError):
        Screen(id=None, module_id=None, name="Usuarios", url="/u").validate()
    with pytest.raises(ValidationError):
        Module(id=None, name="").validate()


def test_menu_profile_row_leaf_detection():
    leaf = MenuProfileRow(menu_id=1, profile_id=1, name="a", hierarchy_level=1, parent_menu_id=2, order=0, url="/a")
    container = MenuProfileRow(menu_id=2, profile_id=1, name="b", hierarchy_level=0, parent_menu_id=None, order=0)

    assert leaf.is_leaf
    assert not container.is_leaf
