# blog_api/__init__.py
from flask import Flask

from blog_api.auth.security import init_credentials
from blog_api.commands import register_commands
from blog_api.config import Config
from blog_api.errors import register_error_handlers
from blog_api.extensions import cors, db, migrate
from blog_api.routes import register_routes  # <- usar el init de routes


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"]
    )

    # El secreto JWT se lee una sola vez, acá
    init_credentials(app)

    register_error_handlers(app)
    register_commands(app)

    # Registrar blueprints centralizado
    register_routes(app)

    return app
