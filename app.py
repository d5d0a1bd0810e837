import logging

from flask import Flask
from openai import OpenAI
from werkzeug.middleware.proxy_fix import ProxyFix

import routes
from core.config import Config
from core.extensions import init_extensions
from core.hooks import register_hooks


def _init_openai_client(app, openai_client=None):
    if openai_client is not None:
        app.openai_client = openai_client
        return

    api_key = app.config.get("OPENAI_API_KEY")
    assert api_key, "ERROR: OPENAI_API_KEY is required"
    app.openai_client = OpenAI(api_key=api_key, timeout=app.config.get("OPENAI_TIMEOUT"))


def create_app(config_overrides=None, openai_client=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL") or "INFO"), logging.INFO))

    _init_openai_client(app, openai_client)
    init_extensions(app)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    routes.register_routes(app)
    register_hooks(app)

    app.logger.info("[openai] model=%s", app.config.get("OPENAI_MODEL"))
    return app


if __name__ == "__main__":
    application = create_app()
    # 요청마다 스레드: 업스트림 대기 중에도 다른 요청 처리
    application.run(host="0.0.0.0", port=application.config["PORT"], threaded=True)
