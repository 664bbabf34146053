from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify, request

from twstyle.errors import TwStyleError
from twstyle.serialize import to_css, to_json

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.errorhandler(TwStyleError)
def handle_style_error(exc: TwStyleError):
    return jsonify({"error": str(exc), "kind": type(exc).__name__}), 422


@api_bp.route("/styles", methods=["OPTIONS"])
@api_bp.route("/css", methods=["OPTIONS"])
def preflight():
    """Handle CORS preflight requests."""
    return "", 204


def _compose(classes):
    """Run the composer, or return a 400 response for malformed input."""
    if not isinstance(classes, (str, list)):
        return None, (jsonify({"error": "classes must be a string or a list"}), 400)
    composer = current_app.extensions["composer"]
    try:
        return composer(classes), None
    except TypeError as exc:
        return None, (jsonify({"error": str(exc)}), 400)


def _classes_from_request():
    if request.method == "GET":
        return request.args.get("classes")
    data = request.get_json(silent=True) or {}
    return data.get("classes")


@api_bp.route("/styles", methods=["GET", "POST"])
def styles():
    """Synthesize a style object from utility classes."""
    classes = _classes_from_request()
    if not classes:
        return jsonify({"error": "classes required"}), 400
    style, error = _compose(classes)
    if error is not None:
        return error
    # Flask's JSON provider sorts keys; emission order must survive.
    return Response(to_json(style), mimetype="application/json")


@api_bp.route("/css", methods=["POST"])
def css():
    """Render the synthesized style object as CSS text."""
    data = request.get_json(silent=True) or {}
    classes = data.get("classes")
    if not classes:
        return jsonify({"error": "classes required"}), 400
    style, error = _compose(classes)
    if error is not None:
        return error
    return Response(to_css(style, data.get("selector", ".tw")), mimetype="text/css")
