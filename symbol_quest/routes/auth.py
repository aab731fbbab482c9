"""Authentication routes."""
from flask import Blueprint, current_app, g, jsonify, request
from marshmallow import ValidationError

from symbol_quest.decorators.auth import require_auth
from symbol_quest.extensions import limiter
from symbol_quest.schemas.auth_schemas import (
    AuthResponseSchema,
    LoginRequestSchema,
    RegisterRequestSchema,
    UserSchema,
)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

register_schema = RegisterRequestSchema()
login_schema = LoginRequestSchema()
auth_response_schema = AuthResponseSchema()
user_schema = UserSchema()


@auth_bp.route("/register", methods=["POST"])
@limiter.limit("10 per minute")
def register():
    """Register a new user.

    ---
    Request body:
        {"email": "user@example.com", "password": "SecurePassword123"}

    Returns:
        201: {"token": "...", "user": {...}}
        400: {"error": "..."}
        409: {"error": "User already exists"}
    """
    try:
        data = register_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error": "Invalid request", "details": err.messages}), 400

    result = current_app.container.auth_service().register(
        email=data["email"], password=data["password"]
    )

    if result.success:
        return jsonify(auth_response_schema.dump(result)), 201
    if result.conflict:
        return jsonify({"error": result.error}), 409
    return jsonify({"error": result.error}), 400


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("20 per minute")
def login():
    """Login a user.

    Returns:
        200: {"token": "...", "user": {...}}
        401: {"error": "Invalid credentials"}
    """
    try:
        data = login_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error": "Invalid request", "details": err.messages}), 400

    result = current_app.container.auth_service().login(
        email=data["email"], password=data["password"]
    )

    if result.success:
        return jsonify(auth_response_schema.dump(result)), 200
    return jsonify({"error": result.error}), 401


@auth_bp.route("/logout", methods=["POST"])
def logout():
    """Tokens are stateless; the client discards its copy."""
    return jsonify({"message": "Logged out successfully"}), 200


@auth_bp.route("/profile", methods=["GET"])
@require_auth
def profile():
    """Current user."""
    return jsonify({"user": user_schema.dump(g.user)}), 200
