from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .tarea import Tarea  # noqa: E402
