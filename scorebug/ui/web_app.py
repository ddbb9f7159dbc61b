"""
Web application module for the indoor hockey scoreboard overlay.

This module contains the Flask server that exposes the match engine as a
JSON API: the operator panel posts commands and the overlay renderer
polls ``/api/state``.
"""
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from ..models import UnknownTeamError
from ..services import MatchEngine, PersistenceService
from ..utils.constants import CARD_PRESETS


class WebAppState:
    """State holder for the web application."""

    def __init__(self, engine: Optional[MatchEngine] = None, auto_save_dir: Optional[str] = None):
        self.engine = engine if engine is not None else MatchEngine()
        self.persistence_service = PersistenceService()
        self.auto_save_dir = auto_save_dir


def _payload() -> Dict[str, Any]:
    """Request JSON body, or an empty dict for bodiless POSTs."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(
    engine: Optional[MatchEngine] = None,
    auto_save_dir: Optional[str] = None,
    resume_from: Optional[str] = None,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        engine: Match engine to serve; a real-time one is created if omitted
        auto_save_dir: Directory the match is auto-saved to before a reset;
                       auto-save is off when None
        resume_from: Saved match file to restore before serving

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app_state = WebAppState(engine, auto_save_dir)
    app.extensions["scorebug"] = app_state

    if resume_from:
        match_state = app_state.persistence_service.load_match_from_file(resume_from)
        app_state.engine.restore_state(match_state)
        app.logger.info("Resumed match from %s", resume_from)

    @app.errorhandler(UnknownTeamError)
    def unknown_team(e: UnknownTeamError):
        return jsonify({"success": False, "error": str(e)}), 404

    @app.errorhandler(ValueError)
    def bad_value(e: ValueError):
        app.logger.warning("Rejected command: %s", e)
        return jsonify({"success": False, "error": str(e)}), 400

    # ==================== Queries ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Full overlay snapshot for the renderer, plus the panel's card buttons."""
        return jsonify({
            "success": True,
            "state": app_state.engine.to_json(),
            "card_presets": [
                {"type": card_type, "duration_minutes": minutes}
                for card_type, minutes in CARD_PRESETS
            ],
        })

    @app.route("/api/teams/<team_id>", methods=["GET"])
    def get_team(team_id: str):
        engine = app_state.engine
        team = engine.get_team(team_id)
        data = team.to_json()
        data["displayed_score"] = engine.get_displayed_score(team_id)
        return jsonify({"success": True, "team": data})

    # ==================== Team commands ==================== #

    @app.route("/api/teams/<team_id>", methods=["POST"])
    def update_team(team_id: str):
        """Edit one display field of a team."""
        data = _payload()
        field_name = data.get("field")
        value = data.get("value")
        if not field_name or not isinstance(value, str):
            return jsonify({"success": False, "error": "Both 'field' and a string 'value' are required"}), 400

        team = app_state.engine.update_team_field(team_id, field_name, value)
        return jsonify({"success": True, "team": team.to_json()})

    @app.route("/api/score", methods=["POST"])
    def update_score():
        """Record a goal (+1) or a correction (-1)."""
        data = _payload()
        team_id = data.get("team_id")
        if not team_id:
            return jsonify({"success": False, "error": "Team id is required"}), 400
        try:
            delta = int(data.get("delta", 0))
        except (TypeError, ValueError):
            return jsonify({"success": False, "error": "Delta must be an integer"}), 400

        score = app_state.engine.record_score_delta(team_id, delta)
        return jsonify({
            "success": True,
            "score": score,
            "goal_sequence": app_state.engine.get_goal_sequence_state().to_dict(),
        })

    @app.route("/api/cards", methods=["POST"])
    def add_card():
        """Issue a card to a team."""
        data = _payload()
        team_id = data.get("team_id")
        card_type = data.get("type")
        if not team_id or not card_type:
            return jsonify({"success": False, "error": "Team id and card type are required"}), 400
        try:
            duration = float(data.get("duration_minutes", 0))
        except (TypeError, ValueError):
            return jsonify({"success": False, "error": "Duration must be a number"}), 400

        card = app_state.engine.add_card(team_id, card_type, duration)
        return jsonify({"success": True, "card": card.to_dict()})

    @app.route("/api/cards/<team_id>/remove-last", methods=["POST"])
    def remove_last_card(team_id: str):
        card = app_state.engine.remove_last_card(team_id)
        return jsonify({"success": True, "removed": card.to_dict() if card else None})

    @app.route("/api/cards/<team_id>/<card_id>", methods=["DELETE"])
    def remove_card(team_id: str, card_id: str):
        card = app_state.engine.remove_card(team_id, card_id)
        if card is None:
            return jsonify({"success": False, "error": "Card not found"}), 404
        return jsonify({"success": True, "removed": card.to_dict()})

    # ==================== Clock commands ==================== #

    @app.route("/api/timer/toggle", methods=["POST"])
    def toggle_timer():
        running = app_state.engine.toggle_running()
        return jsonify({"success": True, "timer_running": running})

    @app.route("/api/timer/penalty-corner", methods=["POST"])
    def toggle_penalty_corner():
        corner = app_state.engine.toggle_penalty_corner()
        return jsonify({"success": True, "is_penalty_corner": corner})

    @app.route("/api/timer/period", methods=["POST"])
    def set_period():
        period = _payload().get("period")
        if not period:
            return jsonify({"success": False, "error": "Period is required"}), 400
        result = app_state.engine.set_period(period)
        return jsonify({"success": True, "period": result.value})

    @app.route("/api/timer/reset", methods=["POST"])
    def reset_match():
        """Reset the match, auto-saving the finished one first when configured."""
        saved_to = None
        if app_state.auto_save_dir:
            saved_to = app_state.persistence_service.auto_save(
                app_state.engine.capture_state(), app_state.auto_save_dir
            )
        app_state.engine.reset_match()
        return jsonify({"success": True, "message": "Match reset", "saved_to": saved_to})

    # ==================== Save / load ==================== #

    @app.route("/api/save", methods=["POST"])
    def save_match():
        """Return the match state for client-side saving."""
        match_data = app_state.persistence_service.serialize_match_state(
            app_state.engine.capture_state()
        )
        return jsonify({"success": True, "data": match_data})

    @app.route("/api/load", methods=["POST"])
    def load_match():
        """Restore match state from uploaded JSON."""
        match_data = _payload().get("match_data")
        if not match_data:
            return jsonify({"success": False, "error": "No match data provided"}), 400

        match_state = app_state.persistence_service.deserialize_match_state(match_data)
        app_state.engine.restore_state(match_state)
        app.logger.info("Match state loaded")
        return jsonify({"success": True, "message": "Match state loaded successfully"})

    return app


def run_web_app(
    host: str = "127.0.0.1",
    port: int = 7122,
    auto_save_dir: Optional[str] = "autosave",
    resume_from: Optional[str] = None,
) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        auto_save_dir: Where matches are saved before a reset (None disables)
        resume_from: Saved match file to continue from
    """
    app = create_app(auto_save_dir=auto_save_dir, resume_from=resume_from)
    try:
        app.run(host=host, port=port, debug=False)
    finally:
        app.extensions["scorebug"].engine.shutdown()


if __name__ == "__main__":
    run_web_app()
