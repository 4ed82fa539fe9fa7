import pytest

from swagdoc.examples.markdown_api import create_app


@pytest.fixture
def client():
    return create_app().test_client()


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/admin/user/"),
        ("get", "/admin/user/7"),
        ("post", "/admin/user/"),
        ("put", "/admin/user/7"),
    ],
)
def test_routes_answer_with_empty_body(client, method, path):
    response = getattr(client, method)(path)
    assert response.status_code == 200
    assert response.data == b""


def test_wrong_method_is_rejected(client):
    assert client.delete("/admin/user/7").status_code == 405
    assert client.put("/admin/user/").status_code == 405


def test_unknown_path_is_not_found(client):
    assert client.get("/admin/user/7/extra").status_code == 404