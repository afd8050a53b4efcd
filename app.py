from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from logging_setup import setup_logging
from manejadores import registrar_manejadores
from models import db
from routes.tareas import tareas_bp


def create_app(config=None):
    # Configuración de la aplicación
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    setup_logging(app.config['LOG_LEVEL'])
    db.init_app(app)

    # Configuración de CORS
    CORS(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": app.config['CORS_METHODS'],
            "allow_headers": "*",
            "supports_credentials": False
        }
    })

    app.register_blueprint(tareas_bp)
    registrar_manejadores(app)

    # Ruta de salud del servidor
    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'message': 'Servidor Flask funcionando correctamente'
        }), 200

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000)
