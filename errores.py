"""Errores de dominio de las tareas.

Cada error lleva el código numérico y el mensaje que se devuelven al cliente
en el sobre ``{"error": <código>, "message": <mensaje>}``; el manejador global
los convierte en respuesta HTTP.
"""


class TareaError(Exception):
    codigo = 500
    estado_http = 500

    def __init__(self, mensaje):
        super().__init__(mensaje)
        self.mensaje = mensaje

    def to_dict(self):
        return {'error': self.codigo, 'message': self.mensaje}


class NombreDuplicadoError(TareaError):
    codigo = 1644
    estado_http = 409

    def __init__(self, mensaje='Ya existe una tarea con el mismo nombre en este proyecto.'):
        super().__init__(mensaje)


class FechaVencimientoInvalidaError(TareaError):
    codigo = 400
    estado_http = 400

    def __init__(self, mensaje='Fecha de vencimiento no válida.'):
        super().__init__(mensaje)


class TareaNoEncontradaError(TareaError):
    codigo = 404
    estado_http = 404


class AlmacenamientoError(TareaError):
    codigo = 500
    estado_http = 500


class ArgumentoInvalidoError(ValueError):
    """Datos de entrada con forma válida pero contenido incorrecto."""
