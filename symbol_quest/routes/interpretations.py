"""Premium interpretation routes."""
import logging

from flask import Blueprint, current_app, g, jsonify, request
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from symbol_quest.decorators.auth import require_auth, require_premium
from symbol_quest.extensions import db, limiter
from symbol_quest.schemas.draw_schemas import EnhancedInterpretationRequestSchema
from symbol_quest.services.interpretation_service import InterpretationError

logger = logging.getLogger(__name__)

interpretations_bp = Blueprint("interpretations", __name__, url_prefix="/api/interpretations")

enhanced_schema = EnhancedInterpretationRequestSchema()


@interpretations_bp.route("/enhanced", methods=["POST"])
@require_auth
@require_premium
@limiter.limit("10 per minute")
def enhanced_interpretation():
    """
    LLM reading for a card.

    ---
    Request body:
        {"card_id": 17, "mood": "hopeful", "question": "...", "draw_date": "2024-05-01"}

    Returns:
        200: {"interpretation": "..."}
        502: {"error": "..."}
    """
    try:
        data = enhanced_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error": "Invalid request", "details": err.messages}), 400

    service = current_app.container.interpretation_service()
    try:
        interpretation = service.generate(data["card_id"], data["mood"], data["question"])
    except InterpretationError as e:
        return jsonify({"error": str(e)}), 502

    if data["draw_date"] is not None:
        _save_interpretation(data["draw_date"], interpretation)

    return jsonify({"interpretation": interpretation}), 200


def _save_interpretation(draw_date, interpretation: str) -> None:
    """Attach the reading to the user's draw; failures only get logged."""
    draw_service = current_app.container.daily_draw_service()
    try:
        saved = draw_service.save_enhanced_interpretation(g.user, draw_date, interpretation)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to save interpretation for user {g.user.id}: {e}")
        return

    if not saved:
        logger.warning(
            f"No draw on {draw_date.isoformat()} for user {g.user.id}, interpretation not saved"
        )
