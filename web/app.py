"""
HackRadar - Web API

Flask app serving the hackathon winners feed and idea suggestions.

Run with: python -m web.app
Or: cd web && python app.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, jsonify, request
from flask_cors import CORS

from hackradar.config import (
    CORS_ORIGINS,
    DEBUG,
    LOG_LEVEL,
    MAX_QUERY_CHARS,
    PING_MESSAGE,
    PORT,
)
from hackradar.logging_setup import configure_logging
from hackradar.pipeline import get_winners
from hackradar.services.idea_generator import generate_ideas

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Build the Flask application with CORS and API routes registered."""
    app = Flask(__name__)

    origins = [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]
    if not origins or "*" in origins:
        origins = "*"
    CORS(app, resources={r"/api/*": {"origins": origins}})

    @app.route("/api/ping")
    def api_ping():
        """Liveness check."""
        return jsonify({"message": PING_MESSAGE})

    @app.route("/api/winners")
    def api_winners():
        """Hackathon winner projects, served from cache for WINNERS_CACHE_TTL."""
        try:
            response = get_winners()
        except Exception:
            logger.exception("[api] /api/winners failed")
            return jsonify({"error": "Failed to fetch winners"}), 500
        return jsonify(response.to_dict())

    @app.route("/api/ideas", methods=["POST"])
    def api_ideas():
        """Idea suggestions for a free-text query."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Missing query"}), 400

        query = str(data.get("query") or "").strip()[:MAX_QUERY_CHARS]
        if not query:
            return jsonify({"error": "Missing query"}), 400

        try:
            response = generate_ideas(query)
        except Exception:
            logger.exception("[api] /api/ideas failed")
            return jsonify({"error": "Failed to generate ideas"}), 500
        return jsonify(response.to_dict())

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found"}), 404
        return error

    @app.errorhandler(405)
    def method_not_allowed(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Method not allowed"}), 405
        return error

    return app


app = create_app()


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    print("=" * 50)
    print("HackRadar API")
    print("=" * 50)
    print(f"Open http://localhost:{PORT}/api/ping in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=DEBUG, port=PORT, threaded=True)
