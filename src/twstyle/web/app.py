from __future__ import annotations

from flask import Flask

from twstyle.generator import UtilityTable
from twstyle.synthesis import StyleComposer


def create_app(
    composer: StyleComposer | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # An empty table still answers requests; every class is then unknown.
    if composer is None:
        composer = StyleComposer(UtilityTable())

    app.extensions["composer"] = composer

    from twstyle.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
