# blog_api/routes/__init__.py
from flask import Flask


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes bajo API_PREFIX.
    Llamá a register_routes(app) desde blog_api.create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .posts import post_bp
    from .users import user_bp

    prefix = app.config.get("API_PREFIX", "/api/v1").rstrip("/")
    app.register_blueprint(user_bp, url_prefix=f"{prefix}/users")
    app.register_blueprint(post_bp, url_prefix=f"{prefix}/posts")
