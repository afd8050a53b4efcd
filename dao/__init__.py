from .tarea_dao import TareaDAO
