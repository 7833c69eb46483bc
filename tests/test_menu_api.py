from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from menuadmin.server.api import app
from menuadmin.server.dependencies import get_store_for
from menuadmin.server.settings import Settings, get_settings


@pytest.fixture()
def client(tmp_path):
    settings = Settings(db_path=tmp_path / "api.db")
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        get_store_for.cache_clear()


def _seed_navigation(client):
    module_id = client.post("/api/modulo", json={"nombre": "Administración"}).json()["id"]
    users = client.post(
        "/api/pantalla",
        json={"nombre": "Usuarios", "url": "/admin/usuarios", "codModulo": module_id},
    ).json()["id"]
    reports = client.post(
        "/api/pantalla",
        json={"nombre": "Reportes", "url": "/admin/reportes", "codModulo": module_id},
    ).json()["id"]
    profile_id = client.post("/api/perfil", json={"nombre": "Administrador"}).json()["id"]

    def menu(name, level, order, screen=None, parent=None):
        payload = {
            "nombre": name,
            "jerarquia": level,
            "orden": order,
            "codModulo": module_id,
            "codPantalla": screen,
            "codMenuPadre": parent,
            "icono": "pi pi-bars",
            "estado": 1,
        }
        response = client.post("/api/menu", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    admin = menu("Administración", 0, 1)
    users_menu = menu("Usuarios", 1, 2, users, admin)
    reports_menu = menu("Reportes", 1, 1, reports, admin)
    config = menu("Configuración", 0, 0)
    for menu_id in (admin, users_menu, reports_menu, config):
        response = client.post("/api/menu-perfil", json={"menuId": menu_id, "perfilId": profile_id})
        assert response.status_code == 201
    return profile_id, {"admin": admin, "users": users_menu, "reports": reports_menu, "config": config}


def test_healthz(client):
    assert client.get("/api/healthz").json() == {"status": "ok"}


def test_menu_tree_endpoint_returns_frontend_shape(client):
    profile_id, ids = _seed_navigation(client)

    response = client.get(f"/api/menu-perfil/jerarquico/perfil/{profile_id}")

    assert response.status_code == 200
    tree = response.json()
    assert [item["codigo"] for item in tree] == [ids["config"], ids["admin"]]
    config, admin = tree
    assert config == {
        "codigo": ids["config"],
        "label": f"{ids['config']}-Configuración",
        "orden": 0,
        "icon": "pi pi-fw pi-folder",
        "items": [],
    }
    assert [item["codigo"] for item in admin["items"]] == [ids["reports"], ids["users"]]
    reports = admin["items"][0]
    assert reports["routerLink"] == ["/admin/reportes"]
    assert reports["icon"] == "pi pi-fw pi-desktop"
    assert "items" not in reports


def test_unknown_profile_has_empty_tree(client):
    response = client.get("/api/menu-perfil/jerarquico/perfil/999")

    assert response.status_code == 200
    assert response.json() == []


def test_diagnostics_report_orphans(client):
    profile_id, ids = _seed_navigation(client)
    client.delete(f"/api/menu-perfil/menu/{ids['admin']}/perfil/{profile_id}")

    body = client.get(f"/api/menu-perfil/jerarquico/perfil/{profile_id}/diagnostico").json()

    assert [item["codigo"] for item in body["items"]] == [ids["config"]]
    assert {anomaly["menuId"] for anomaly in body["anomalies"]} == {ids["users"], ids["reports"]}
    assert all(anomaly["kind"] == "orphan_reference" for anomaly in body["anomalies"])
    assert all(anomaly["parentMenuId"] == ids["admin"] for anomaly in body["anomalies"])


def test_menu_crud_and_status_description(client):
    module_id = client.post("/api/modulo", json={"nombre": "Ventas"}).json()["id"]
    payload = {
        "nombre": "Ventas",
        "jerarquia": 0,
        "orden": 1,
        "codModulo": module_id,
        "icono": "pi pi-dollar",
        "estado": 1,
    }
    created = client.post("/api/menu", json=payload)
    assert created.status_code == 201
    menu_id = created.json()["id"]
    assert created.json()["estado"] == "Activo"

    updated = client.put(f"/api/menu/idmenu/{menu_id}", json={**payload, "estado": 0, "orden": 4})
    assert updated.json()["estado"] == "Inactivo"
    assert updated.json()["orden"] == 4
    assert client.get(f"/api/menu/idmenu/{menu_id}").json()["nombre"] == "Ventas"
    assert len(client.get("/api/menu").json()) == 1

    assert client.delete(f"/api/menu/idmenu/{menu_id}").status_code == 204
    missing = client.get(f"/api/menu/idmenu/{menu_id}")
    assert missing.status_code == 404
    assert missing.json()["message"] == f"Menu with ID {menu_id} not found"
    assert missing.json()["path"] == f"/api/menu/idmenu/{menu_id}"


def test_invalid_status_code_is_rejected(client):
    module_id = client.post("/api/modulo", json={"nombre": "Ventas"}).json()["id"]
    response = client.post(
        "/api/menu",
        json={"nombre": "Ventas", "jerarquia": 0, "orden": 1, "codModulo": module_id, "icono": "x", "estado": 7},
    )

    assert response.status_code == 400
    assert "estado" in response.json()["message"]


def test_request_validation_errors_use_error_body(client):
    response = client.post("/api/pantalla", json={"nombre": "Sin url", "codModulo": 0})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation Failed"
    assert any(detail.startswith("url") for detail in body["details"])
    assert any(detail.startswith("codModulo") for detail in body["details"])


def test_profile_creation_sets_location_and_duplicate_assignment_conflicts(client):
    created = client.post("/api/perfil", json={"nombre": "Auditor"})
    assert created.status_code == 201
    profile_id = created.json()["id"]
    assert created.headers["location"] == f"/api/perfil/{profile_id}"

    module_id = client.post("/api/modulo", json={"nombre": "Auditoría"}).json()["id"]
    menu_id = client.post(
        "/api/menu",
        json={"nombre": "Auditoría", "jerarquia": 0, "orden": 0, "codModulo": module_id, "icono": "x", "estado": 1},
    ).json()["id"]
    assignment = {"menuId": menu_id, "perfilId": profile_id}

    assert client.post("/api/menu-perfil", json=assignment).status_code == 201
    conflict = client.post("/api/menu-perfil", json=assignment)
    assert conflict.status_code == 409
    assert conflict.json()["error"] == "Conflict"
    assert client.get(f"/api/menu-perfil/perfil/{profile_id}").json() == [assignment]

    assert client.delete(f"/api/perfil/{profile_id}").status_code == 204
    assert client.get(f"/api/menu-perfil/perfil/{profile_id}").json() == []


def test_module_in_use_cannot_be_deleted(client):
    module_id = client.post("/api/modulo", json={"nombre": "Seguridad"}).json()["id"]
    client.post("/api/pantalla", json={"nombre": "Usuarios", "url": "/u", "codModulo": module_id})

    response = client.delete(f"/api/modulo/{module_id}")

    assert response.status_code == 409
    assert client.get(f"/api/modulo/{module_id}").status_code == 200


def test_store_cache_is_shared_per_path_and_bounded(tmp_path):
    get_store_for.cache_clear()
    first = get_store_for(tmp_path / "a.db")

    assert get_store_for(tmp_path / "a.db") is first
    for index in range(20):
        get_store_for(tmp_path / f"extra-{index}.db")
    info = get_store_for.cache_info()
    assert info.currsize <= info.maxsize
    get_store_for.cache_clear()


def test_menu_update_rejects_parent_cycle(client):
    module_id = client.post("/api/modulo", json={"nombre": "Seguridad"}).json()["id"]

    def payload(name, level, parent=None):
        return {
            "nombre": name,
            "jerarquia": level,
            "orden": 0,
            "codModulo": module_id,
            "codMenuPadre": parent,
            "icono": "x",
            "estado": 1,
        }

    first = client.post("/api/menu", json=payload("A", 0)).json()["id"]
    second = client.post("/api/menu", json=payload("B", 1, first)).json()["id"]

    response = client.put(f"/api/menu/idmenu/{first}", json=payload("A", 1, second))

    assert response.status_code == 400
    assert "codMenuPadre" in response.json()["message"]
    assert client.get(f"/api/menu/idmenu/{first}").json().get("codMenuPadre") is None
