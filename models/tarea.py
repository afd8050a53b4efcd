from . import db


class Tarea(db.Model):
    __tablename__ = 'tg_tareas'
    __table_args__ = (
        db.UniqueConstraint('id_tg_proyectos', 'nombre_tg_tareas', name='uq_tarea_nombre_proyecto'),
    )

    id_tarea = db.Column('id_tg_tareas', db.Integer, primary_key=True)
    id_proyecto = db.Column('id_tg_proyectos', db.Integer, nullable=False)
    id_usuario = db.Column('id_usuario', db.Integer, nullable=False)
    nombre = db.Column('nombre_tg_tareas', db.String(100), nullable=False)
    descripcion = db.Column('descripcion_tg_tareas', db.Text)
    prioridad = db.Column('id_tm_prioridad', db.SmallInteger)
    estado = db.Column('id_tm_estado', db.SmallInteger)
    fecha_vencimiento = db.Column('fecha_vencimiento_tg_tareas', db.Date)
    fecha_creacion = db.Column('fecha_creacion_tg_tareas', db.DateTime, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id_tarea': self.id_tarea,
            'id_proyecto': self.id_proyecto,
            'id_usuario': self.id_usuario,
            'nombre': self.nombre,
            'descripcion': self.descripcion,
            'prioridad': self.prioridad,
            'estado': self.estado,
            'fecha_vencimiento': self.fecha_vencimiento.isoformat() if self.fecha_vencimiento else None,
            'fecha_creacion': self.fecha_creacion.isoformat() if self.fecha_creacion else None,
        }
