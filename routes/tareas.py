from flask import Blueprint, request, jsonify

from dao import TareaDAO
from errores import ArgumentoInvalidoError, TareaNoEncontradaError

tareas_bp = Blueprint('tareas', __name__, url_prefix='/api/tareas')

tarea_dao = TareaDAO()

CAMPOS_REGISTRO = ['id_proyecto', 'id_usuario', 'nombre', 'prioridad', 'estado', 'fecha_vencimiento']
CAMPOS_ACTUALIZACION = ['nombre', 'prioridad', 'estado', 'fecha_vencimiento']
CAMPOS_ENTEROS = ['id_proyecto', 'id_usuario', 'prioridad', 'estado']


def leer_datos(requeridos):
    # force=True: el cuerpo se interpreta como JSON aunque falte el Content-Type
    datos = request.get_json(force=True)
    if not isinstance(datos, dict):
        raise ArgumentoInvalidoError('el cuerpo debe ser un objeto JSON')
    faltantes = [k for k in requeridos if datos.get(k) is None]
    if faltantes:
        raise ArgumentoInvalidoError(f'faltan campos obligatorios: {", ".join(faltantes)}')
    for campo in CAMPOS_ENTEROS:
        valor = datos.get(campo)
        if valor is not None and (isinstance(valor, bool) or not isinstance(valor, int)):
            raise ArgumentoInvalidoError(f'{campo} debe ser un número entero')
    if not isinstance(datos['nombre'], str) or not datos['nombre'].strip():
        raise ArgumentoInvalidoError('el nombre no puede estar vacío')
    return datos


@tareas_bp.route('', methods=['POST'])
def registrar_tarea():
    datos = leer_datos(CAMPOS_REGISTRO)
    tarea = tarea_dao.registrar_tarea(
        datos['id_proyecto'],
        datos['id_usuario'],
        datos['nombre'],
        datos.get('descripcion'),
        datos['prioridad'],
        datos['estado'],
        datos['fecha_vencimiento'],
    )
    return jsonify(tarea.to_dict()), 201


@tareas_bp.route('/proyecto/<int:id_proyecto>', methods=['GET'])
def listar_tareas(id_proyecto):
    tareas = tarea_dao.obtener_tareas_por_proyecto(id_proyecto)
    return jsonify([t.to_dict() for t in tareas]), 200


@tareas_bp.route('/<int:id_tarea>', methods=['GET'])
def obtener_tarea(id_tarea):
    tarea = tarea_dao.obtener_tarea_por_id(id_tarea)
    return jsonify(tarea.to_dict()), 200


@tareas_bp.route('/<int:id_tarea>', methods=['PUT'])
def actualizar_tarea(id_tarea):
    datos = leer_datos(CAMPOS_ACTUALIZACION)
    if not tarea_dao.existe_tarea(id_tarea):
        raise TareaNoEncontradaError(f'No se encontró una tarea con el ID: {id_tarea}')
    tarea = tarea_dao.actualizar_tarea(
        id_tarea,
        datos['nombre'],
        datos.get('descripcion'),
        datos['prioridad'],
        datos['estado'],
        datos['fecha_vencimiento'],
    )
    tarea.id_tarea = id_tarea
    return jsonify(tarea.to_dict()), 200


@tareas_bp.route('/<int:id_tarea>', methods=['DELETE'])
def eliminar_tarea(id_tarea):
    if not tarea_dao.existe_tarea(id_tarea):
        raise TareaNoEncontradaError(f'No se encontró una tarea con el ID: {id_tarea}')
    tarea_dao.eliminar_tarea(id_tarea)
    return jsonify({'mensaje': 'Tarea eliminada'}), 200
