from __future__ import annotations

import logging

from flask import Blueprint, Flask, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_ABC_PREFIXES, DEFAULT_ABC_THRESHOLD
from ..core.exceptions import ConflictError, DomainError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

ERROR_STATUS_MAP = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 503,
}


def get_status_code(error: Exception) -> int:
    return ERROR_STATUS_MAP.get(type(error), 500)


def _json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("JSON object body required")
    return body


def _query_int(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer", details={"field": name})


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employees", __name__, url_prefix="/api/employees")
    service = container.employee_service

    @bp.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = get_status_code(e)
        if status >= 500:
            logger.error("%s: %s", type(e).__name__, e.message)
        else:
            logger.warning("%s: %s", type(e).__name__, e.message)
        return jsonify({"error": type(e).__name__, "message": e.message, "details": e.details}), status

    @bp.get("", endpoint="list")
    def list_employees():
        return jsonify([e.to_dict() for e in service.list_employees()])

    @bp.post("", endpoint="add")
    def add_employee():
        body = _json_body()
        service.add_employee(body.get("name"), body.get("value", 0))
        return "", 204

    @bp.post("/update", endpoint="update")
    def update_employee():
        body = _json_body()
        service.update_employee(body.get("originalName"), body.get("newName"), body.get("value", 0))
        return "", 204

    @bp.delete("", endpoint="delete")
    def delete_employee():
        service.delete_employee(request.args.get("name", ""))
        return "", 204

    @bp.post("/increment-rule", endpoint="increment_rule")
    def increment_rule():
        service.apply_increment_rule()
        return "", 204

    @bp.get("/abc-sums", endpoint="abc_sums")
    def abc_sums():
        prefixes = request.args.get("prefixes") or "".join(DEFAULT_ABC_PREFIXES)
        threshold = _query_int("threshold", DEFAULT_ABC_THRESHOLD)
        recompute = request.args.get("recompute", "0").lower() in ("1", "true", "yes")
        sums = service.compute_abc_sums(list(prefixes), threshold, recompute=recompute)
        return jsonify([s.to_dict() for s in sums])

    app.register_blueprint(bp)
