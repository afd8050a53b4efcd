import os

from dotenv import load_dotenv

load_dotenv()

ORIGENES_PREDETERMINADOS = 'http://localhost:5173,https://to-do-list-peruvian-git-main-hades0413-pluton.vercel.app'


def _lista(valor):
    return [v.strip() for v in valor.split(',') if v.strip()]


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'mysql+mysqlconnector://root@localhost:3306/tasking')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Política CORS para todo lo que cuelga de /api/
    CORS_ORIGINS = _lista(os.getenv('CORS_ORIGINS', ORIGENES_PREDETERMINADOS))
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
