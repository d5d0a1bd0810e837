from flask import Blueprint, jsonify

api_health_bp = Blueprint("api_health", __name__)


@api_health_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200
