import logging
import re
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from errores import (
    AlmacenamientoError,
    FechaVencimientoInvalidaError,
    NombreDuplicadoError,
    TareaNoEncontradaError,
)
from models import db
from models.tarea import Tarea

logger = logging.getLogger(__name__)

# SQLSTATE con el que los procedimientos señalan un nombre repetido
SQLSTATE_NOMBRE_DUPLICADO = '45000'

PATRON_FECHA = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# Tipos de las columnas de fecha para que el driver entregue date/datetime
TIPOS_FECHAS = {
    'fecha_vencimiento_tg_tareas': db.Date,
    'fecha_creacion_tg_tareas': db.DateTime,
}


def parsear_fecha(fecha_vencimiento):
    """Convierte una fecha ``YYYY-MM-DD`` en ``date``."""
    if not isinstance(fecha_vencimiento, str) or not PATRON_FECHA.match(fecha_vencimiento):
        raise FechaVencimientoInvalidaError()
    try:
        return datetime.strptime(fecha_vencimiento, '%Y-%m-%d').date()
    except ValueError:
        raise FechaVencimientoInvalidaError()


def _mensaje_error(error):
    # Mensaje del driver sin el SQL que añade SQLAlchemy
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


class TareaDAO:
    """Acceso a la tabla ``tg_tareas`` y a sus procedimientos almacenados.

    Usa la sesión de Flask-SQLAlchemy del contexto actual salvo que se le
    pase otra al construirlo.
    """

    def __init__(self, sesion=None):
        self._sesion = sesion

    @property
    def sesion(self):
        return self._sesion if self._sesion is not None else db.session

    def registrar_tarea(self, id_proyecto, id_usuario, nombre, descripcion,
                        prioridad, estado, fecha_vencimiento):
        sql = text('CALL RegistrarTarea(:id_proyecto, :id_usuario, :nombre, :descripcion, '
                   ':prioridad, :estado, :fecha_vencimiento)')
        parametros = {
            'id_proyecto': id_proyecto,
            'id_usuario': id_usuario,
            'nombre': nombre,
            'descripcion': descripcion,
            'prioridad': prioridad,
            'estado': estado,
            'fecha_vencimiento': fecha_vencimiento,
        }
        logger.debug('RegistrarTarea %s', parametros)

        try:
            self.sesion.execute(sql, parametros)
        except SQLAlchemyError as e:
            self.sesion.rollback()
            # Se busca el código en el texto del driver, sin los parámetros enviados
            if SQLSTATE_NOMBRE_DUPLICADO in _mensaje_error(e):
                logger.warning('Tarea duplicada en el proyecto %s: %s', id_proyecto, nombre)
                raise NombreDuplicadoError() from e
            logger.error('Error al registrar la tarea: %s', _mensaje_error(e))
            raise AlmacenamientoError(f'Error al registrar la tarea: {_mensaje_error(e)}') from e

        try:
            fecha = parsear_fecha(fecha_vencimiento)
        except FechaVencimientoInvalidaError:
            self.sesion.rollback()
            raise
        self.sesion.commit()

        return Tarea(
            id_proyecto=id_proyecto,
            id_usuario=id_usuario,
            nombre=nombre,
            descripcion=descripcion,
            prioridad=prioridad,
            estado=estado,
            fecha_vencimiento=fecha,
        )

    def obtener_tareas_por_proyecto(self, id_proyecto):
        sql = text('SELECT * FROM tg_tareas WHERE id_tg_proyectos = :id_proyecto').columns(**TIPOS_FECHAS)
        filas = self.sesion.execute(sql, {'id_proyecto': id_proyecto}).mappings()

        # El listado no lleva proyecto ni usuario
        return [
            Tarea(
                id_tarea=fila['id_tg_tareas'],
                nombre=fila['nombre_tg_tareas'],
                descripcion=fila['descripcion_tg_tareas'],
                prioridad=fila['id_tm_prioridad'],
                estado=fila['id_tm_estado'],
                fecha_vencimiento=fila['fecha_vencimiento_tg_tareas'],
                fecha_creacion=fila['fecha_creacion_tg_tareas'],
            )
            for fila in filas
        ]

    def actualizar_tarea(self, id_tarea, nombre, descripcion, prioridad, estado, fecha_vencimiento):
        sql = text('CALL actualizar_tarea(:id_tarea, :nombre, :descripcion, :prioridad, '
                   ':estado, :fecha_vencimiento)')
        parametros = {
            'id_tarea': id_tarea,
            'nombre': nombre,
            'descripcion': descripcion,
            'prioridad': prioridad,
            'estado': estado,
            'fecha_vencimiento': fecha_vencimiento,
        }
        logger.debug('actualizar_tarea %s', parametros)

        try:
            self.sesion.execute(sql, parametros)
        except SQLAlchemyError as e:
            self.sesion.rollback()
            sqlstate = getattr(e.orig, 'sqlstate', None) if isinstance(e, DBAPIError) else None
            if sqlstate == SQLSTATE_NOMBRE_DUPLICADO:
                logger.warning('Nombre duplicado al actualizar la tarea %s: %s', id_tarea, nombre)
                raise NombreDuplicadoError() from e
            logger.error('Error al actualizar la tarea %s: %s', id_tarea, _mensaje_error(e))
            raise AlmacenamientoError(f'Error al actualizar la tarea: {_mensaje_error(e)}') from e

        try:
            fecha = parsear_fecha(fecha_vencimiento)
        except FechaVencimientoInvalidaError:
            self.sesion.rollback()
            raise
        self.sesion.commit()

        return Tarea(
            nombre=nombre,
            descripcion=descripcion,
            prioridad=prioridad,
            estado=estado,
            fecha_vencimiento=fecha,
        )

    def eliminar_tarea(self, id_tarea):
        try:
            self.sesion.execute(text('CALL eliminar_tarea(:id_tarea)'), {'id_tarea': id_tarea})
            self.sesion.commit()
        except SQLAlchemyError as e:
            self.sesion.rollback()
            logger.error('Error al eliminar la tarea %s: %s', id_tarea, _mensaje_error(e))
            raise AlmacenamientoError(f'Error al eliminar la tarea: {_mensaje_error(e)}') from e

    def existe_tarea(self, id_tarea):
        sql = text('SELECT COUNT(*) FROM tg_tareas WHERE id_tg_tareas = :id_tarea')
        try:
            total = self.sesion.execute(sql, {'id_tarea': id_tarea}).scalar()
        except SQLAlchemyError as e:
            raise AlmacenamientoError(
                f'Error al verificar la existencia de la tarea: {_mensaje_error(e)}') from e
        return total is not None and total > 0

    def obtener_tarea_por_id(self, id_tarea):
        sql = text('SELECT * FROM tg_tareas WHERE id_tg_tareas = :id_tarea').columns(**TIPOS_FECHAS)
        try:
            fila = self.sesion.execute(sql, {'id_tarea': id_tarea}).mappings().one()
        except SQLAlchemyError as e:
            # No se distingue entre "sin filas" y fallo de la consulta
            raise TareaNoEncontradaError(f'No se encontró una tarea con el ID: {id_tarea}') from e

        return Tarea(
            id_tarea=fila['id_tg_tareas'],
            id_proyecto=fila['id_tg_proyectos'],
            id_usuario=fila['id_usuario'],
            nombre=fila['nombre_tg_tareas'],
            descripcion=fila['descripcion_tg_tareas'],
            prioridad=fila['id_tm_prioridad'],
            estado=fila['id_tm_estado'],
            fecha_vencimiento=fila['fecha_vencimiento_tg_tareas'],
            fecha_creacion=fila['fecha_creacion_tg_tareas'],
        )
