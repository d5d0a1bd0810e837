# routes/__init__.py
from .api.generate import api_generate_bp
from .api.health import api_health_bp


def register_routes(app):
    app.register_blueprint(api_health_bp)
    app.register_blueprint(api_generate_bp)
