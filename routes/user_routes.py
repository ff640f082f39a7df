from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from errors import InvalidArgumentError, NotFoundError
from models import Show
from routes.context import admin_required, user_service
from schemas import error_list, show_schema, user_schema
from services import ShowService

admin_bp = Blueprint("admin_api", __name__)

show_service = ShowService()


def _invalid_input(exc):
    return jsonify({"message": "Invalid input", "errors": error_list(exc)}), 400


@admin_bp.route("/api/users", methods=["GET"])
@admin_required
def list_users(session_user):
    return jsonify({"users": user_schema.dump(user_service.find_all(), many=True)})


@admin_bp.route("/api/users/<int:user_id>", methods=["DELETE"])
@admin_required
def delete_user(user_id: int, session_user):
    if user_id == session_user.id:
        return jsonify({"message": "Admins cannot delete themselves"}), 400
    try:
        user_service.delete_by_id(user_id)
    except NotFoundError:
        return jsonify({"message": "User not found"}), 404
    return jsonify({"message": "User deleted successfully", "user_id": user_id})


@admin_bp.route("/api/shows", methods=["GET"])
def list_shows():
    return jsonify({"shows": show_schema.dump(show_service.find_all(), many=True)})


@admin_bp.route("/api/shows", methods=["POST"])
@admin_required
def create_show(session_user):
    try:
        payload = show_schema.load(request.get_json() or {})
    except ValidationError as exc:
        return _invalid_input(exc)

    try:
        show = show_service.save(Show(**payload))
    except InvalidArgumentError as exc:
        return jsonify({"message": str(exc)}), 409
    return jsonify({"message": "Show created", "show": show_schema.dump(show)}), 201


@admin_bp.route("/api/shows/<int:show_id>", methods=["PUT", "PATCH"])
@admin_required
def update_show(show_id: int, session_user):
    try:
        payload = show_schema.load(request.get_json() or {}, partial=True)
    except ValidationError as exc:
        return _invalid_input(exc)
    if not payload:
        return jsonify({"message": "No valid fields provided for update"}), 400

    try:
        show = show_service.find_by_id(show_id)
        for field, value in payload.items():
            setattr(show, field, value)
        show_service.update(show)
    except NotFoundError:
        return jsonify({"message": "Show not found"}), 404
    except InvalidArgumentError as exc:
        return jsonify({"message": str(exc)}), 409
    return jsonify({"message": "Show updated successfully", "show": show_schema.dump(show)})


@admin_bp.route("/api/shows/<int:show_id>", methods=["DELETE"])
@admin_required
def delete_show(show_id: int, session_user):
    try:
        show_service.delete_by_id(show_id)
    except NotFoundError:
        return jsonify({"message": "Show not found"}), 404
    return jsonify({"message": "Show deleted successfully", "show_id": show_id})
