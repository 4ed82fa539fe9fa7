from swagdoc.examples.object_map import Data, Response, create_app


def test_response_to_dict_uses_json_names():
    response = Response(title={"fr": "Carte"}, custom_type={"k": 1}, object=Data(text="hello"))
    assert response.to_dict() == {
        "title": {"fr": "Carte"},
        "map_data": {"k": 1},
        "object": {"title": "hello"},
    }


def test_response_to_dict_copies_maps():
    title = {"a": "b"}
    result = Response(title=title).to_dict()
    result["title"]["c"] = "d"
    assert title == {"a": "b"}


def test_default_response_has_empty_parts():
    assert Response().to_dict() == {"title": {}, "map_data": {}, "object": {"title": ""}}


def test_get_map_endpoint():
    client = create_app().test_client()
    response = client.get("/api/v1/map")
    assert response.status_code == 200
    assert response.get_json() == {
        "title": {"en": "Map"},
        "map_data": {"key": "value"},
        "object": {"title": "object text"},
    }


def test_get_map_rejects_post():
    client = create_app().test_client()
    assert client.post("/api/v1/map").status_code == 405