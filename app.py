# app.py
"""
Flask entrypoint for the NFL wins pool service.

Routes (JSON):
  - /api/standings        season standings per owner
  - /api/week?week=N      game grid for week N (omit week for the current week)

Anything else answers 404.

Notes:
  - The pool config is fetched fresh on every /api/ request.
  - Payloads are cached in-process for CACHE_TTL_MINUTES; responses themselves are
    marked no-store so intermediaries never hold a stale copy.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, Response, request

from wins_pool.cache import TTLCache
from wins_pool.config import AppConfig
from wins_pool.espn_client import ESPNClient, FetchError
from wins_pool.handlers.pool_handler import PoolHandler
from wins_pool.ownership import MissingConfiguration
from wins_pool.services.week_grid_service import WeekGridService
from wins_pool.services.weeks_service import WeeksService
from wins_pool.services.wins_service import WinsService

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def json_response(payload: Dict[str, Any], status: int = 200) -> Response:
    """Serialize payload (keys in insertion order) with the UTF-8 JSON content type."""
    return Response(json.dumps(payload), status=status, content_type=JSON_CONTENT_TYPE)


def create_app(
    cfg: Optional[AppConfig] = None,
    client: Optional[ESPNClient] = None,
    cache: Optional[TTLCache] = None,
) -> Flask:
    """
    App factory.

    Builds shared dependencies (client + cache + services) once per process. Tests
    pass their own config, a fake client and/or a cache with a controlled clock.
    """
    cfg = cfg or AppConfig()
    client = client or ESPNClient(cfg.scoreboard_url, timeout=cfg.http_timeout_seconds)
    if cache is None and cfg.cache_enabled:
        cache = TTLCache()

    weeks = WeeksService(client=client)
    handler = PoolHandler(
        cfg=cfg,
        client=client,
        cache=cache,
        wins_service=WinsService(client=client, weeks=weeks),
        grid_service=WeekGridService(client=client, weeks=weeks),
    )

    app = Flask(__name__)

    # -------------------------
    # Shared parsing helpers
    # -------------------------

    def parse_week() -> Optional[int]:
        """Parse ?week=N; missing or non-integer values mean 'current week'."""
        raw = request.args.get("week")
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    # -------------------------
    # Response headers & errors
    # -------------------------

    @app.after_request
    def api_headers(resp: Response) -> Response:
        """Disable intermediary caching and allow cross-origin reads on /api/ JSON."""
        if request.path.startswith("/api/") and resp.content_type == JSON_CONTENT_TYPE:
            resp.headers["Cache-Control"] = "no-store"
            resp.headers["Access-Control-Allow-Origin"] = "*"
        return resp

    @app.errorhandler(404)
    def not_found(_err):
        """Plain-text 404 for every unknown path."""
        return Response("Not found", status=404, content_type="text/plain; charset=utf-8")

    @app.errorhandler(MissingConfiguration)
    def missing_configuration(err: MissingConfiguration):
        """No pool config location configured."""
        logger.error("pool config unavailable: %s", err)
        return json_response({"error": str(err)}, status=500)

    @app.errorhandler(FetchError)
    def upstream_failure(err: FetchError):
        """Upstream (ESPN or config source) answered with an error; nothing is cached."""
        logger.error("upstream fetch failed: %s", err)
        return json_response({"error": str(err), "status": err.status, "url": err.url}, status=502)

    # -------------------------
    # JSON routes
    # -------------------------

    @app.get("/api/standings")
    def api_standings():
        """Season standings: owners ranked by total wins, plus unowned teams."""
        return json_response(handler.standings())

    @app.get("/api/week")
    def api_week():
        """
        Game grid for a single week.

        Query:
          - week=N (optional; defaults to ESPN's current week, then 1)
        """
        return json_response(handler.week(parse_week()))

    # -------------------------
    # Health
    # -------------------------

    @app.get("/health")
    def health():
        """Simple health endpoint for Docker/monitoring checks."""
        return {"ok": True}

    return app


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# WSGI entrypoint for gunicorn (Docker CMD uses: app:app)
app = create_app()

if __name__ == "__main__":
    # Dev server (not for production).
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8000")), debug=True)
