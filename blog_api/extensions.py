# blog_api/extensions.py
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# Se inicializan contra la app en create_app()
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
