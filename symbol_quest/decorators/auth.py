"""Authentication and subscription guard decorators."""
from functools import wraps
from typing import Any, Callable

from flask import current_app, g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


def require_auth(fn: Callable) -> Callable:
    """
    Require a valid bearer token and load the user into g.user.

    Usage:
        @require_auth
        def profile():
            return jsonify({"user": g.user.to_dict()})
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            verify_jwt_in_request()
        except (JWTExtendedException, PyJWTError):
            return jsonify({"error": "Invalid token"}), 401

        user_id = get_jwt_identity()
        user = current_app.container.auth_service().get_user(user_id)
        if user is None:
            return jsonify({"error": "User not found"}), 401

        g.user = user
        return fn(*args, **kwargs)

    return wrapper


def require_premium(fn: Callable) -> Callable:
    """Require g.user on the premium tier. Apply below @require_auth."""

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        user = getattr(g, "user", None)
        if user is None or not user.is_premium:
            return (
                jsonify({"error": "Premium subscription required"}),
                403,
            )
        return fn(*args, **kwargs)

    return wrapper
