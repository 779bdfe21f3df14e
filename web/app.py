"""
KhojVerse - Web API

A small Flask JSON API over one in-process navigation controller. The
browser front end renders screens; this module only owns state and ranking.

Run with: python -m web.app
Or: cd web && python app.py
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, request, jsonify
from src.catalog import load_catalog, load_suggestions
from src.config import (
    CATALOG_PATH,
    DEFAULT_SORT,
    LOG_LEVEL,
    SUGGESTIONS_PATH,
    WEB_HOST,
    WEB_PORT,
    configure_logging,
)
from src.discovery import rank, sort_options
from src.models import (
    Category,
    ContractViolation,
    IllegalTransition,
    LIST_CATEGORIES,
    MODE_CATEGORIES,
)
from src.navigation import NavigationController, action_from_dict

app = Flask(__name__)


# =============================================================================
# Controller
# =============================================================================

# Single in-process controller (one user per server process)
_controller = None


def get_controller() -> NavigationController:
    """Get the shared controller, creating it from config on first use."""
    global _controller
    if _controller is None:
        _controller = NavigationController.from_config(
            load_catalog(CATALOG_PATH),
            load_suggestions(SUGGESTIONS_PATH),
        )
    return _controller


def set_controller(controller) -> None:
    """Replace the shared controller (None rebuilds it from config on next use)."""
    global _controller
    _controller = controller


def _state_response(controller: NavigationController) -> dict:
    """State plus everything the current screen needs to render."""
    state = controller.state
    name, avatar = controller.identity()
    ideas = controller.ordered_ideas()
    return {
        "success": True,
        "state": state.to_dict(),
        "identity": {"name": name, "avatar": avatar},
        "count": len(ideas),
        "results": [idea.to_dict() for idea in ideas],
        "suggestions": controller.suggestions() if state.discovery.suggestions_visible else [],
    }


# =============================================================================
# Error Handlers
# =============================================================================

@app.errorhandler(IllegalTransition)
def handle_illegal_transition(e):
    return jsonify({"success": False, "error": str(e)}), 409


@app.errorhandler(ContractViolation)
def handle_contract_violation(e):
    return jsonify({"success": False, "error": str(e)}), 400


# =============================================================================
# Discovery Endpoints
# =============================================================================

@app.route("/api/ideas")
def api_ideas():
    """Rank the catalog for an explicit query/category/sort (stateless)."""
    controller = get_controller()

    query = request.args.get("q", "")
    category = request.args.get("category", Category.TRENDING.value)
    sort = request.args.get("sort", DEFAULT_SORT)

    ideas = rank(controller.catalog, query, category, sort)

    return jsonify({
        "success": True,
        "query": query,
        "category": category,
        "sort": sort,
        "count": len(ideas),
        "results": [idea.to_dict() for idea in ideas],
    })


@app.route("/api/suggestions")
def api_suggestions():
    """Search suggestions for a query (defaults to the current query)."""
    controller = get_controller()
    query = request.args.get("q")
    return jsonify({
        "success": True,
        "suggestions": controller.suggestions(query),
    })


@app.route("/api/sort-options")
def api_sort_options():
    """Sort options in menu order."""
    return jsonify({"success": True, "options": sort_options()})


@app.route("/api/categories")
def api_categories():
    """List- and mode-categories."""
    return jsonify({
        "success": True,
        "list_categories": [c.value for c in LIST_CATEGORIES],
        "mode_categories": [c.value for c in MODE_CATEGORIES],
    })


# =============================================================================
# Navigation Endpoints
# =============================================================================

@app.route("/api/state")
def api_state():
    """Current navigation and discovery state."""
    return jsonify(_state_response(get_controller()))


@app.route("/api/dispatch", methods=["POST"])
def api_dispatch():
    """Apply one action, e.g. {"type": "SelectCategory", "category": "Research"}."""
    data = request.get_json(silent=True)

    if not data:
        return jsonify({"success": False, "error": "No action provided"}), 400

    controller = get_controller()
    controller.dispatch(action_from_dict(data))
    return jsonify(_state_response(controller))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    """Return to the landing screen with a fresh state."""
    controller = get_controller()
    controller.reset()
    return jsonify(_state_response(controller))


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    print("=" * 50)
    print("🚀 KhojVerse API")
    print("=" * 50)
    print(f"Listening on http://{WEB_HOST}:{WEB_PORT}")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=True, host=WEB_HOST, port=WEB_PORT)
