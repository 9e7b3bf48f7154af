"""The HTTP application: routes, error mapping and the maintenance check."""

from __future__ import annotations

import logging

from flask import Flask, Response, abort, jsonify, request

from todoapi.container import Container
from todoapi.dto import CreateTodoDTO, TodoDTO, paging_to_dict
from todoapi.errors import ApiError, CommonError
from todoapi.queries import TodoQueryParams

logger = logging.getLogger(__name__)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _bad_request(message: str) -> Response:
    return Response(message, status=400, mimetype="text/plain")


def _checked_id(todo_id: int) -> int:
    if not _I32_MIN <= todo_id <= _I32_MAX:
        abort(404)
    return todo_id


def create_app(container: Container) -> Flask:
    """Create the Flask application serving the to-do API."""
    app = Flask(__name__)
    app.extensions["todoapi.container"] = container
    todo_service = container.todo_service
    service_context_service = container.service_context_service

    @app.before_request
    def _maintenance_check() -> Response | None:
        if service_context_service.is_maintenance_active():
            logger.info("Service is in maintenance mode")
            return Response(status=503)
        return None

    @app.after_request
    def _log_request(response: Response) -> Response:
        logger.info(
            '%s "%s %s" %s',
            request.remote_addr,
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
        )
        return response

    @app.errorhandler(CommonError)
    def _handle_common_error(exc: CommonError):
        api_error = ApiError(exc)
        return jsonify(api_error.to_response_body()), api_error.status_code

    @app.post("/todos")
    def create_todo():
        if not request.is_json:
            return _bad_request("Content type error")
        data = request.get_json(silent=True)
        try:
            dto = CreateTodoDTO.from_json(data)
        except ValueError as exc:
            return _bad_request(f"Json deserialize error: {exc}")
        todo = todo_service.create(dto.to_domain())
        return jsonify(TodoDTO.from_domain(todo).to_dict())

    @app.get("/todos")
    def list_todos():
        try:
            params = TodoQueryParams.from_mapping(request.args)
        except ValueError as exc:
            return _bad_request(f"Query deserialize error: {exc}")
        return jsonify(paging_to_dict(todo_service.list(params)))

    @app.get("/todos/<int(signed=True):todo_id>")
    def get_todo(todo_id: int):
        todo = todo_service.get(_checked_id(todo_id))
        return jsonify(TodoDTO.from_domain(todo).to_dict())

    @app.delete("/todos/<int(signed=True):todo_id>")
    def delete_todo(todo_id: int):
        todo_service.delete(_checked_id(todo_id))
        return Response(status=204)

    return app