"""Card catalog routes."""
from flask import Blueprint, current_app, jsonify

cards_bp = Blueprint("cards", __name__, url_prefix="/api/cards")


@cards_bp.route("", methods=["GET"])
def list_cards():
    """All 22 cards ordered by id."""
    catalog = current_app.container.catalog()
    return jsonify({"cards": [card.to_dict() for card in catalog]}), 200


@cards_bp.route("/<int:card_id>/meaning", methods=["GET"])
def card_meaning(card_id: int):
    """Full card details, 404 for unknown ids."""
    card = current_app.container.catalog().get(card_id)
    if card is None:
        return jsonify({"error": "Card not found"}), 404
    return jsonify({"card": card.to_dict()}), 200
