# extensions.py
from flask import current_app, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# limiter는 객체만 만들고, 실제 설정(storage)은 app.config에서 가져오도록
limiter = Limiter(key_func=get_remote_address)

cors = CORS()


def generate_rate_limit():
    return current_app.config.get("RATELIMIT_GENERATE") or "100 per 15 minutes"


def _rate_limited(e):
    return jsonify({"error": "Too many requests, please try again later."}), 429


def init_extensions(app):
    # 레이트리밋 초기화
    limiter.init_app(app)
    app.register_error_handler(429, _rate_limited)

    cors.init_app(
        app,
        resources={
            r"/*": {
                "origins": app.config.get("CORS_ORIGINS") or "*",
                "methods": app.config.get("CORS_METHODS") or ["POST", "GET", "OPTIONS"],
            }
        },
    )
