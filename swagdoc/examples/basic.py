"""The basic sample service: a pet lookup, a struct-array lookup and an upload."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from flask import Flask, Response, request

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _member(data: dict[str, Any], key: str) -> Any:
    """Look a member up by exact name, then case-insensitively."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    return None


def _as_int(value: Any, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {value!r} into integer field {where}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value {value} out of range for field {where}")
    return value


def _as_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into string field {where}")
    return value


def _as_object(value: Any, where: str) -> dict[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode {value!r} into object {where}")
    return value


def _as_list(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"cannot decode {value!r} into array field {where}")
    return value


@dataclass
class Category:
    """The category a pet belongs to."""

    id: int = 0
    name: str = ""


@dataclass
class Tag:
    """A label attached to a pet."""

    id: int = 0
    name: str = ""


def _category(value: Any) -> Category:
    data = _as_object(value, "Pet.category")
    if data is None:
        return Category()
    return Category(
        id=_as_int(_member(data, "id"), "Pet.category.id"),
        name=_as_str(_member(data, "name"), "Pet.category.name"),
    )


def _tag(value: Any) -> Tag:
    data = _as_object(value, "Tag")
    if data is None:
        return Tag()
    return Tag(id=_as_int(_member(data, "id"), "Tag.id"), name=_as_str(_member(data, "name"), "Tag.name"))


@dataclass
class Pet:
    """A pet with its category, photos and tags."""

    id: int = 0
    category: Category = field(default_factory=Category)
    name: str = ""
    photo_urls: list[str] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Pet:
        """Build a pet from decoded JSON; raises ValueError on values of the wrong kind."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"cannot decode {type(data).__name__} into Pet")
        return cls(
            id=_as_int(_member(data, "id"), "Pet.id"),
            category=_category(_member(data, "category")),
            name=_as_str(_member(data, "name"), "Pet.name"),
            photo_urls=[_as_str(url, "Pet.photoUrls") for url in _as_list(_member(data, "photoUrls"), "Pet.photoUrls")],
            tags=[_tag(item) for item in _as_list(_member(data, "tags"), "Pet.tags")],
            status=_as_str(_member(data, "status"), "Pet.status"),
        )


@dataclass
class APIError:
    """The error body the endpoints document."""

    error_code: int = 0
    error_message: str = ""
    created_at: datetime = _ZERO_TIME


@dataclass
class RevValue:
    """A status, an error number and a datum."""

    status: bool = False
    err: int = 0
    data: int = 0


def _empty() -> Response:
    return Response(b"", status=200)


def create_app() -> Flask:
    """Build the basic service."""
    app = Flask(__name__)

    @app.route("/testapi/get-string-by-int/", methods=_ALL_METHODS)
    @app.route("/testapi/get-string-by-int/<path:rest>", methods=_ALL_METHODS)
    def get_string_by_int(rest: str = ""):
        try:
            Pet.from_dict(json.loads(request.get_data()))
        except ValueError:
            return _empty()
        return _empty()

    @app.route("/testapi/get-struct-array-by-string/", methods=_ALL_METHODS)
    @app.route("/testapi/get-struct-array-by-string/<path:rest>", methods=_ALL_METHODS)
    def get_struct_array_by_string(rest: str = ""):
        return _empty()

    @app.route("/testapi/upload", methods=_ALL_METHODS)
    def upload():
        return _empty()

    return app


def main(argv=None) -> int:
    """Serve the basic service."""
    parser = argparse.ArgumentParser(prog="basic", description="Run the basic sample service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())