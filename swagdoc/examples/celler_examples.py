"""The ``/examples`` endpoints of the cellar sample service."""

from __future__ import annotations

import json
import re

from flask import Flask, Response, jsonify, request

from swagdoc.examples.celler_model import HTTPError

PREFIX = "/api/v1/examples"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class _AtoiError(ValueError):
    pass


def _atoi(text: str) -> int:
    quoted = json.dumps(text, ensure_ascii=False)
    if not _INT_PATTERN.fullmatch(text):
        raise _AtoiError(f"strconv.Atoi: parsing {quoted}: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise _AtoiError(f"strconv.Atoi: parsing {quoted}: value out of range")
    return value


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def error_response(status: int, err: BaseException | str) -> Response:
    """A JSON error body carrying ``status`` and the error's message."""
    response = jsonify(HTTPError(code=status, message=str(err)).to_dict())
    response.status_code = status
    return response


def register_example_routes(app: Flask) -> None:
    """Add the example endpoints to ``app``."""

    @app.get(f"{PREFIX}/ping")
    def ping_example():
        return _text("pong")

    @app.get(f"{PREFIX}/calc")
    def calc_example():
        try:
            val1 = _atoi(request.args.get("val1", ""))
            val2 = _atoi(request.args.get("val2", ""))
        except _AtoiError as exc:
            return error_response(400, exc)
        return _text(str(val1 + val2))

    @app.get(f"{PREFIX}/groups/<group_id>/accounts/<account_id>")
    def path_params_example(group_id: str, account_id: str):
        try:
            group = _atoi(group_id)
            account = _atoi(account_id)
        except _AtoiError as exc:
            return error_response(400, exc)
        return _text(f"group_id={group} account_id={account}")

    @app.get(f"{PREFIX}/header")
    def header_example():
        return _text(request.headers.get("Authorization", ""))

    @app.get(f"{PREFIX}/securities")
    def securities_example():
        return Response(b"", status=200)

    @app.get(f"{PREFIX}/attribute")
    def attribute_example():
        args = request.args
        return _text(
            "enumstring={} enumint={} enumnumber={} string={} int={} default={}".format(
                args.get("enumstring", ""),
                args.get("enumint", ""),
                args.get("enumnumber", ""),
                args.get("string", ""),
                args.get("int", ""),
                args.get("default", ""),
            )
        )