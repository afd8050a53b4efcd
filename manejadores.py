import logging

from flask import jsonify
from werkzeug.exceptions import BadRequest, HTTPException, MethodNotAllowed, NotFound

from errores import TareaError

logger = logging.getLogger(__name__)

MENSAJE_JSON_INVALIDO = 'Hay errores en la validación, revisa que los datos en el JSON sean correctos.'


def respuesta_error(codigo, mensaje, estado_http):
    return jsonify({'error': codigo, 'message': mensaje}), estado_http


def registrar_manejadores(app):
    """Convierte las excepciones no controladas en el sobre JSON de error."""

    @app.errorhandler(TareaError)
    def manejar_error_tarea(error):
        return jsonify(error.to_dict()), error.estado_http

    @app.errorhandler(BadRequest)
    def manejar_json_invalido(error):
        return respuesta_error(400, MENSAJE_JSON_INVALIDO, 400)

    @app.errorhandler(ValueError)
    def manejar_argumento_invalido(error):
        return respuesta_error(400, f'Datos inválidos: {error}', 400)

    @app.errorhandler(NotFound)
    def manejar_ruta_no_encontrada(error):
        return respuesta_error(404, 'Ruta no encontrada', 404)

    @app.errorhandler(MethodNotAllowed)
    def manejar_metodo_no_permitido(error):
        return respuesta_error(405, 'Método no permitido', 405)

    @app.errorhandler(HTTPException)
    def manejar_error_http(error):
        return respuesta_error(error.code, error.description, error.code)

    @app.errorhandler(Exception)
    def manejar_error_general(error):
        logger.exception('Error no controlado')
        return respuesta_error(500, f'Ocurrió un error inesperado en el servidor: {error}', 500)
