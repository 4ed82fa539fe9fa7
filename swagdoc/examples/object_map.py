"""The object-map sample service: a response holding maps and a nested object."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any

from flask import Flask, jsonify


@dataclass
class Data:
    """A nested object carrying some text."""

    text: str = ""


@dataclass
class Response:
    """A response with a string map, a free-form map and a nested object."""

    title: dict[str, str] = field(default_factory=dict)
    custom_type: dict[str, Any] = field(default_factory=dict)
    object: Data = field(default_factory=Data)

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the response."""
        return {
            "title": dict(self.title),
            "map_data": dict(self.custom_type),
            "object": {"title": self.object.text},
        }


def create_app() -> Flask:
    """Build the object-map service."""
    app = Flask(__name__)

    @app.get("/api/v1/map")
    def get_map():
        payload = Response(
            title={"en": "Map"},
            custom_type={"key": "value"},
            object=Data(text="object text"),
        )
        return jsonify(payload.to_dict())

    return app


def main(argv=None) -> int:
    """Serve the object-map service."""
    parser = argparse.ArgumentParser(prog="object-map", description="Run the object-map sample service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())