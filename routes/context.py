from functools import wraps

from flask import jsonify, redirect, url_for
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from errors import NotFoundError
from services import UserService

user_service = UserService()


def resolve_session_user():
    """Return the user behind the request's access-token cookie, or None."""
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError):
        return None
    identity = get_jwt_identity()
    if identity is None:
        return None
    try:
        return user_service.find_by_id(int(identity))
    except (NotFoundError, ValueError):
        return None


def with_session_user(fn):
    # views receive the optional user as ``session_user``
    @wraps(fn)
    def wrapper(*args, **kwargs):
        return fn(*args, session_user=resolve_session_user(), **kwargs)

    return wrapper


def login_required_view(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = resolve_session_user()
        if user is None:
            return redirect(url_for("auth.login"))
        return fn(*args, session_user=user, **kwargs)

    return wrapper


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = resolve_session_user()
        if user is None or not user.is_admin:
            return jsonify({"message": "Admin access required"}), 403
        return fn(*args, session_user=user, **kwargs)

    return wrapper
