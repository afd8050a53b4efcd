import logging
import sys


def setup_logging(level='INFO'):
    """
    Configura el logging de la aplicación con un único handler a stderr.

    Llamar una sola vez, al crear la aplicación.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Evitar handlers duplicados si se crea la app varias veces (tests)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # El log de peticiones de werkzeug solo para avisos
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
