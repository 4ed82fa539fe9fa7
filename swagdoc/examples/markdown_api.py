"""The markdown sample service: a small user administration API."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime, timezone

from flask import Flask, Response

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class User:
    """A user account."""

    id: int = 0
    email: str = ""
    password: str = ""


UsersCollection = list[User]


@dataclass
class APIError:
    """The error body the endpoints document."""

    error_code: int = 0
    error_message: str = ""
    created_at: datetime = _ZERO_TIME


def _empty() -> Response:
    return Response(b"", status=200)


def create_app() -> Flask:
    """Build the user administration service."""
    app = Flask(__name__)

    @app.get("/admin/user/")
    def list_users():
        return _empty()

    @app.get("/admin/user/<user_id>")
    def get_user(user_id: str):
        return _empty()

    @app.post("/admin/user/")
    def add_user():
        return _empty()

    @app.put("/admin/user/<user_id>")
    def update_user(user_id: str):
        return _empty()

    return app


def main(argv=None) -> int:
    """Serve the user administration service."""
    parser = argparse.ArgumentParser(prog="markdown", description="Run the markdown sample service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())