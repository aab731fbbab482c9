"""Daily draw routes."""
from flask import Blueprint, current_app, g, jsonify, request
from marshmallow import ValidationError

from symbol_quest.decorators.auth import require_auth
from symbol_quest.extensions import limiter
from symbol_quest.schemas.draw_schemas import DailyDrawRequestSchema, HistoryQuerySchema
from symbol_quest.services.daily_draw_service import (
    DailyLimitReachedError,
    DrawAlreadyCompletedError,
)

draws_bp = Blueprint("draws", __name__, url_prefix="/api/draws")

daily_draw_schema = DailyDrawRequestSchema()
history_query_schema = HistoryQuerySchema()


@draws_bp.route("/today", methods=["GET"])
@require_auth
def today_status():
    """
    Today's draw status.

    Returns:
        200: {"has_drawn", "can_draw", "card", "draws_today", "limit"}
    """
    service = current_app.container.daily_draw_service()
    return jsonify(service.get_today_status(g.user)), 200


@draws_bp.route("/daily", methods=["POST"])
@require_auth
@limiter.limit("30 per minute")
def daily_draw():
    """
    Draw today's card.

    ---
    Request body:
        {"mood": "hopeful", "question": "What should I focus on today?"}

    Returns:
        200: {"success": true, "card": {...}}
        400: validation error
        403: {"error", "message", "upgrade_required": true}
        409: {"error", "message", "card": {...}}
    """
    try:
        data = daily_draw_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error": "Invalid request", "details": err.messages}), 400

    service = current_app.container.daily_draw_service()
    try:
        draw = service.perform_daily_draw(g.user, data["mood"], data["question"])
    except DrawAlreadyCompletedError as e:
        return (
            jsonify(
                {
                    "error": "Already drawn today",
                    "message": "You've already drawn your card for today. Come back tomorrow!",
                    "card": service.draw_to_dict(e.draw),
                }
            ),
            409,
        )
    except DailyLimitReachedError as e:
        return (
            jsonify(
                {
                    "error": "Daily limit reached",
                    "message": str(e),
                    "upgrade_required": True,
                }
            ),
            403,
        )

    return jsonify({"success": True, "card": service.draw_to_dict(draw)}), 200


@draws_bp.route("/history", methods=["GET"])
@require_auth
def draw_history():
    """
    Past draws, newest first.

    Query params:
        limit: 1-100, default 20
    """
    try:
        params = history_query_schema.load(request.args)
    except ValidationError as err:
        return jsonify({"error": "Invalid request", "details": err.messages}), 400

    service = current_app.container.daily_draw_service()
    draws = service.get_draw_history(g.user, params["limit"])
    return (
        jsonify({"draws": [service.draw_to_dict(d) for d in draws], "count": len(draws)}),
        200,
    )
