from datetime import date, datetime

import pytest

from app import create_app
from models import db
from models.tarea import Tarea


@pytest.fixture()
def app():
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SQLALCHEMY_ENGINE_OPTIONS': {},
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def tareas_guardadas(app):
    """Dos tareas del proyecto 1 y una del proyecto 2, insertadas directamente."""
    tareas = [
        Tarea(id_tarea=1, id_proyecto=1, id_usuario=7, nombre='Diseñar modelo', descripcion='ER inicial',
              prioridad=1, estado=1, fecha_vencimiento=date(2024, 5, 1),
              fecha_creacion=datetime(2024, 4, 1, 9, 30)),
        Tarea(id_tarea=2, id_proyecto=1, id_usuario=7, nombre='Crear API', descripcion=None,
              prioridad=2, estado=1, fecha_vencimiento=date(2024, 6, 15),
              fecha_creacion=datetime(2024, 4, 2, 10, 0)),
        Tarea(id_tarea=3, id_proyecto=2, id_usuario=8, nombre='Desplegar', descripcion='Producción',
              prioridad=3, estado=2, fecha_vencimiento=date(2024, 7, 1),
              fecha_creacion=datetime(2024, 4, 3, 11, 15)),
    ]
    db.session.add_all(tareas)
    db.session.commit()
    return tareas
