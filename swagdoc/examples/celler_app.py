"""The cellar sample service: accounts, bottles, an admin endpoint and examples."""

from __future__ import annotations

import argparse
import json
from typing import Any

from flask import Flask, Response, jsonify, request

from swagdoc.examples.celler_examples import _atoi, _AtoiError, error_response, register_example_routes
from swagdoc.examples.celler_model import (
    Account,
    AccountStore,
    AddAccount,
    Admin,
    NameInvalidError,
    NoRowError,
    UpdateAccount,
    bottle_one,
    bottles_all,
)

API_PREFIX = "/api/v1"


class _BindError(ValueError):
    pass


def _bind_name(type_name: str) -> str:
    """Read the request body as a JSON object and return its ``name`` member."""
    raw = request.get_data()
    if not raw.strip():
        raise _BindError("EOF")
    try:
        data: Any = json.loads(raw)
    except ValueError as exc:
        raise _BindError(str(exc)) from exc
    if data is None:
        return ""
    if not isinstance(data, dict):
        kind = "array" if isinstance(data, list) else type(data).__name__
        raise _BindError(f"json: cannot unmarshal {kind} into Go value of type model.{type_name}")
    name = data.get("name", "")
    if name is None:
        return ""
    if not isinstance(name, str):
        raise _BindError(f"json: cannot unmarshal into field {type_name}.name of type string")
    return name


def _json(payload: Any, status: int = 200) -> Response:
    response = jsonify(payload)
    response.status_code = status
    return response


def create_app(store: AccountStore | None = None) -> Flask:
    """Build the service around ``store``, a fresh AccountStore by default."""
    accounts = store if store is not None else AccountStore()
    app = Flask(__name__)

    @app.get(f"{API_PREFIX}/accounts/<account_id>")
    def show_account(account_id: str):
        try:
            aid = _atoi(account_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        try:
            account = accounts.account_one(aid)
        except NoRowError as exc:
            return error_response(404, exc)
        return _json(account.to_dict())

    @app.get(f"{API_PREFIX}/accounts")
    def list_accounts():
        q = request.args.get("q", "")
        return _json([a.to_dict() for a in accounts.all_accounts(q)])

    @app.post(f"{API_PREFIX}/accounts")
    def add_account():
        try:
            body = AddAccount(name=_bind_name("AddAccount"))
        except _BindError as exc:
            return error_response(400, exc)
        try:
            body.validate()
        except NameInvalidError as exc:
            return error_response(400, exc)
        account = Account(name=body.name)
        account.id = accounts.insert(account)
        return _json(account.to_dict())

    @app.patch(f"{API_PREFIX}/accounts/<account_id>")
    def update_account(account_id: str):
        try:
            aid = _atoi(account_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        try:
            body = UpdateAccount(name=_bind_name("UpdateAccount"))
        except _BindError as exc:
            return error_response(400, exc)
        account = Account(id=aid, name=body.name)
        try:
            accounts.update(account)
        except NoRowError as exc:
            return error_response(404, exc)
        return _json(account.to_dict())

    @app.delete(f"{API_PREFIX}/accounts/<account_id>")
    def delete_account(account_id: str):
        try:
            aid = _atoi(account_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        try:
            accounts.delete(aid)
        except NoRowError as exc:
            return error_response(404, exc)
        return Response(status=204)

    @app.post(f"{API_PREFIX}/accounts/<account_id>/images")
    def upload_account_image(account_id: str):
        try:
            aid = _atoi(account_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        upload = request.files.get("file")
        if upload is None:
            return error_response(400, "http: no such file")
        return _json({"message": f"upload complete userID={aid} filename={upload.filename}"})

    @app.get(f"{API_PREFIX}/bottles/<bottle_id>")
    def show_bottle(bottle_id: str):
        try:
            bid = _atoi(bottle_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        try:
            bottle = bottle_one(bid)
        except NoRowError as exc:
            return error_response(404, exc)
        return _json(bottle.to_dict())

    @app.get(f"{API_PREFIX}/bottles")
    def list_bottles():
        return _json([b.to_dict() for b in bottles_all()])

    @app.post(f"{API_PREFIX}/admin/auth")
    def admin_auth():
        auth_header = request.headers.get("Authorization", "")
        if not auth_header:
            return error_response(401, "Authorization is required Header")
        if auth_header != "admin":
            return error_response(
                401, f"this user isn't authorized to operation key={auth_header} expected=admin"
            )
        return _json(Admin(id=1, name="admin").to_dict())

    register_example_routes(app)
    return app


def main(argv=None) -> int:
    """Serve the cellar service."""
    parser = argparse.ArgumentParser(prog="celler", description="Run the cellar sample service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())