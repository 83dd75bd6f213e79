"""Create/get/replace/delete behaviour shared by every integer-keyed resource."""
import pytest

from restaurant_service.resources import RESOURCES_BY_PATH

# resource -> (body for POST, body for PUT)
SAMPLES = {
    "admin": (
        {"username": "root", "password": "secret"},
        {"username": "root", "password": "changed"},
    ),
    "staff": (
        {"username": "mesero1", "password": "1234", "status": "activo", "role": "Mesero"},
        {"username": "mesero1", "password": "1234", "status": "inactivo", "role": "Mesero"},
    ),
    "menu": (
        {"menuname": "Menú Especial"},
        {"menuname": "Menú de Año Nuevo"},
    ),
    "menuitem": (
        {"menuid": 1, "menuitemname": "Tacos al pastor", "price": 85.5},
        {"menuid": 1, "menuitemname": "Tacos de suadero", "price": 90},
    ),
    "order": (
        {"status": "pendiente", "total": 120.5, "order_date": "2025-01-10"},
        {"status": "pagada", "total": 120.5, "order_date": "2025-01-11"},
    ),
    "orderdetail": (
        {"orderID": 1, "itemID": 2, "quantity": 3},
        {"orderID": 1, "itemID": 2, "quantity": 5},
    ),
    "reports": (
        {"report_date": "2025-01-31", "report_data": "Cierre de mes", "adminid": 1},
        {"report_date": "2025-02-28", "report_data": "Cierre de febrero", "adminid": 1},
    ),
}

PATHS = sorted(SAMPLES)


@pytest.mark.parametrize("path", PATHS)
def test_create_then_get_returns_input_plus_key(client, path):
    resource = RESOURCES_BY_PATH[path]
    body, _ = SAMPLES[path]

    res = client.post(f"/{path}", json=body)
    assert res.status_code == 201
    created = res.json()
    key = created[resource.key]
    assert created == {resource.key: key, **body}

    res = client.get(f"/{path}/{key}")
    assert res.status_code == 200
    assert res.json() == created


@pytest.mark.parametrize("path", PATHS)
def test_list_returns_all_rows(client, path):
    body, _ = SAMPLES[path]
    assert client.get(f"/{path}").json() == []

    client.post(f"/{path}", json=body)
    client.post(f"/{path}", json=body)

    rows = client.get(f"/{path}").json()
    assert len(rows) == 2


@pytest.mark.parametrize("path", PATHS)
def test_replace_updates_every_field(client, path):
    resource = RESOURCES_BY_PATH[path]
    body, replacement = SAMPLES[path]
    key = client.post(f"/{path}", json=body).json()[resource.key]

    res = client.put(f"/{path}/{key}", json=replacement)
    assert res.status_code == 200
    assert res.json() == {resource.key: key, **replacement}
    assert client.get(f"/{path}/{key}").json() == {resource.key: key, **replacement}


@pytest.mark.parametrize("path", PATHS)
def test_replace_missing_key_is_not_found_without_side_effects(client, path):
    resource = RESOURCES_BY_PATH[path]
    _, replacement = SAMPLES[path]

    res = client.put(f"/{path}/9999", json=replacement)
    assert res.status_code == 404
    assert res.json() == {"error": resource.not_found_message("update", "9999")}
    assert client.get(f"/{path}").json() == []


@pytest.mark.parametrize("path", PATHS)
def test_get_missing_key_is_not_found(client, path):
    resource = RESOURCES_BY_PATH[path]
    res = client.get(f"/{path}/9999")
    assert res.status_code == 404
    assert res.json() == {"error": resource.not_found_message("get", "9999")}


@pytest.mark.parametrize("path", PATHS)
def test_delete_twice_succeeds_then_not_found(client, path):
    resource = RESOURCES_BY_PATH[path]
    body, _ = SAMPLES[path]
    key = client.post(f"/{path}", json=body).json()[resource.key]

    first = client.delete(f"/{path}/{key}")
    assert first.status_code == 200
    assert first.json()["message"] == resource.deleted_message(str(key))

    second = client.delete(f"/{path}/{key}")
    assert second.status_code == 404
    assert second.json() == {"error": resource.not_found_message("delete", str(key))}

    assert client.get(f"/{path}/{key}").status_code == 404


@pytest.mark.parametrize("path, echo_key", [("order", "deletedOrder"), ("orderdetail", "deletedOrderDetail")])
def test_delete_echoes_removed_row(client, path, echo_key):
    body, _ = SAMPLES[path]
    created = client.post(f"/{path}", json=body).json()
    key = created[RESOURCES_BY_PATH[path].key]

    res = client.delete(f"/{path}/{key}")
    assert res.json()[echo_key] == created


def test_delete_without_echo_only_confirms(client):
    key = client.post("/admin", json=SAMPLES["admin"][0]).json()["id"]
    assert client.delete(f"/admin/{key}").json() == {"message": "Admin eliminado"}


def test_missing_fields_are_written_as_null(client):
    res = client.post("/staff", json={"username": "solo"})
    assert res.status_code == 201
    row = res.json()
    assert row["password"] is None
    assert row["status"] is None
    assert row["role"] is None

    res = client.put(f"/staff/{row['staffid']}", json={"username": "solo", "status": "activo"})
    assert res.json()["status"] == "activo"
    assert res.json()["password"] is None


def test_menu_scenario(client):
    res = client.post("/menu", json={"menuname": "Menú Especial"})
    assert res.status_code == 201
    assert res.json() == {"menuid": 1, "menuname": "Menú Especial"}

    assert client.get("/menu/1").json() == {"menuid": 1, "menuname": "Menú Especial"}

    res = client.put("/menu/1", json={"menuname": "Menú de Año Nuevo"})
    assert res.status_code == 200
    assert res.json() == {"menuid": 1, "menuname": "Menú de Año Nuevo"}

    res = client.delete("/menu/1")
    assert res.status_code == 200
    assert res.json() == {"message": "Menu eliminado correctamente"}

    res = client.get("/menu/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Menu no encontrado"}
