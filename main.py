"""
main.py — Heap Visualizer Flask App
====================================
The JSON server the front-end polls while it animates the heap.

Routes:
  GET  /                     – API info
  GET  /api/state            – fire due timer ticks, return current state
  GET  /api/operations       – operation registry (labels, pseudocode)
  POST /api/insert           – insert {"value": n}
  POST /api/insert_random    – insert a random integer
  POST /api/delete_min       – remove the minimum
  POST /api/play             – start auto-play
  POST /api/pause            – pause auto-play
  POST /api/toggle           – play/pause
  POST /api/step             – advance exactly one step
  POST /api/speed            – {"level": 1..10} or {"preset": "slow" | …}
  POST /api/reset            – clear the heap

State management:
  One HeapSession per app, kept in app.extensions.  The session runs on
  a PolledScheduler: every request first fires the ticks that came due
  since the last one, so the browser's polling drives the animation.
  Run the dev server single-threaded (threaded=False); the controller
  is not thread-safe.
"""

import logging
from typing import Callable, Optional

from flask import Flask, current_app, jsonify, request

from config import Settings, settings as default_settings
from algorithms import list_operations
from engine import HeapSession, PolledScheduler, SPEED_PRESETS

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Flask:
    settings = settings or default_settings

    app = Flask(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.config["SETTINGS"] = settings
    app.extensions["heap_session"] = HeapSession(
        scheduler=PolledScheduler(clock),
        interval_ms=settings.DEFAULT_INTERVAL_MS,
        auto_play=settings.AUTO_PLAY,
        random_min=settings.RANDOM_MIN,
        random_max=settings.RANDOM_MAX,
        seed=settings.RANDOM_SEED,
    )

    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
def get_session() -> HeapSession:
    return current_app.extensions["heap_session"]


def state_response(**extra):
    session = get_session()
    payload = session.state()
    payload.update(extra)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.before_request
    def pump_timers():
        get_session().pump()

    @app.route("/")
    def index():
        return jsonify({
            "name": "Heap Visualizer API",
            "operations": [op.key for op in list_operations()],
            "speed_presets": sorted(SPEED_PRESETS),
        })

    @app.route("/api/state")
    def api_state():
        return state_response()

    @app.route("/api/operations")
    def api_operations():
        return jsonify([
            {
                "key":             op.key,
                "label":           op.label,
                "pseudocode":      op.pseudocode,
                "takes_value":     op.takes_value,
                "complexity_time": op.complexity_time,
                "description":     op.description,
                "tags":            op.tags,
            }
            for op in list_operations()
        ])

    # -- operations --
    @app.route("/api/insert", methods=["POST"])
    def api_insert():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "value" not in data:
            return jsonify({"error": "Body must be JSON with a 'value' field"}), 400
        accepted = get_session().insert(data["value"])
        return state_response(accepted=accepted)

    @app.route("/api/insert_random", methods=["POST"])
    def api_insert_random():
        value = get_session().insert_random()
        return state_response(accepted=True, value=value)

    @app.route("/api/delete_min", methods=["POST"])
    def api_delete_min():
        removed = get_session().delete_min()
        return state_response(accepted=removed)

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        get_session().reset()
        return state_response()

    # -- playback --
    @app.route("/api/play", methods=["POST"])
    def api_play():
        get_session().play()
        return state_response()

    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        get_session().pause()
        return state_response()

    @app.route("/api/toggle", methods=["POST"])
    def api_toggle():
        get_session().toggle_play()
        return state_response()

    @app.route("/api/step", methods=["POST"])
    def api_step():
        get_session().step()
        return state_response()

    @app.route("/api/speed", methods=["POST"])
    def api_speed():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Body must be JSON"}), 400
        session = get_session()
        if "preset" in data:
            if data["preset"] not in SPEED_PRESETS:
                return jsonify({"error": f"Unknown preset: {data['preset']}"}), 400
            session.set_speed_preset(data["preset"])
        elif "level" in data:
            level = data["level"]
            if isinstance(level, bool) or not isinstance(level, int):
                return jsonify({"error": "level must be an integer 1..10"}), 400
            session.set_speed_level(level)
        else:
            return jsonify({"error": "Provide 'level' or 'preset'"}), 400
        return state_response()


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=default_settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logger.info("Heap Visualizer on http://%s:%d", default_settings.HOST, default_settings.PORT)
    app.run(
        host=default_settings.HOST,
        port=default_settings.PORT,
        debug=default_settings.DEBUG,
        threaded=False,
    )
