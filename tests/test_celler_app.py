import io

import pytest

from swagdoc.examples.celler_app import create_app
from swagdoc.examples.celler_model import AccountStore


@pytest.fixture
def store():
    return AccountStore()


@pytest.fixture
def client(store):
    app = create_app(store)
    app.testing = True
    return app.test_client()


def test_show_account(client):
    response = client.get("/api/v1/accounts/1")
    assert response.status_code == 200
    assert response.get_json()["name"] == "account_1"
    assert response.get_json()["id"] == 1


def test_show_account_bad_id(client):
    response = client.get("/api/v1/accounts/abc")
    assert response.status_code == 400
    assert response.get_json()["code"] == 400


def test_show_account_missing(client):
    response = client.get("/api/v1/accounts/99")
    assert response.status_code == 404
    assert response.get_json()["message"] == "no rows in result set"


def test_list_accounts_all_and_filtered(client):
    everything = client.get("/api/v1/accounts").get_json()
    assert [a["name"] for a in everything] == ["account_1", "account_2", "account_3"]
    filtered = client.get("/api/v1/accounts?q=account_2").get_json()
    assert [a["id"] for a in filtered] == [2]


def test_add_account(client, store):
    response = client.post("/api/v1/accounts", json={"name": "new one"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["name"] == "new one"
    assert store.account_one(body["id"]).id == body["id"]
    assert len(store.all_accounts()) == 4


def test_add_account_empty_name(client, store):
    response = client.post("/api/v1/accounts", json={"name": ""})
    assert response.status_code == 400
    assert response.get_json()["message"] == "name is empty"
    assert len(store.all_accounts()) == 3


def test_add_account_bad_json(client):
    response = client.post("/api/v1/accounts", data="{not json", content_type="application/json")
    assert response.status_code == 400


def test_update_account(client, store):
    response = client.patch("/api/v1/accounts/2", json={"name": "renamed"})
    assert response.status_code == 200
    assert response.get_json()["name"] == "renamed"
    assert store.account_one(2).name == "renamed"


def test_update_missing_account(client):
    response = client.patch("/api/v1/accounts/42", json={"name": "renamed"})
    assert response.status_code == 404
    assert response.get_json()["message"] == "account id=42 is not found"


def test_delete_account(client, store):
    response = client.delete("/api/v1/accounts/1")
    assert response.status_code == 204
    assert response.data == b""
    assert [a.id for a in store.all_accounts()] == [2, 3]
    assert client.delete("/api/v1/accounts/1").status_code == 404


def test_upload_account_image(client):
    response = client.post(
        "/api/v1/accounts/1/images",
        data={"file": (io.BytesIO(b"data"), "picture.png")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    assert response.get_json()["message"] == "upload complete userID=1 filename=picture.png"


def test_upload_without_file(client):
    response = client.post("/api/v1/accounts/1/images", data={}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_bottles(client):
    listed = client.get("/api/v1/bottles").get_json()
    assert [b["name"] for b in listed] == ["bottle_1", "bottle_2", "bottle_3"]
    one = client.get("/api/v1/bottles/2").get_json()
    assert one["account"]["name"] == "accout_2"
    assert client.get("/api/v1/bottles/9").status_code == 404
    assert client.get("/api/v1/bottles/x").status_code == 400


def test_admin_auth_requires_header(client):
    response = client.post("/api/v1/admin/auth")
    assert response.status_code == 401
    assert response.get_json()["message"] == "Authorization is required Header"


def test_admin_auth_wrong_key(client):
    response = client.post("/api/v1/admin/auth", headers={"Authorization": "token"})
    assert response.status_code == 401
    assert response.get_json()["message"] == "this user isn't authorized to operation key=token expected=admin"


def test_admin_auth_ok(client):
    response = client.post("/api/v1/admin/auth", headers={"Authorization": "admin"})
    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "name": "admin"}


def test_example_routes_registered(client):
    response = client.get("/api/v1/examples/ping")
    assert response.status_code == 200
    assert response.data == b"pong"


def test_separate_apps_have_separate_stores():
    first = create_app().test_client()
    second = create_app().test_client()
    first.delete("/api/v1/accounts/3")
    assert first.get("/api/v1/accounts/3").status_code == 404
    assert second.get("/api/v1/accounts/3").status_code == 200