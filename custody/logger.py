"""Colored logging for the registry. Set LOG_LEVEL to change verbosity and LOG_DIR to also log to a file."""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

LOG_FILE = 'custody.log'

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Registry')
)

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}
FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
}


def level_from_env(value=None):
    value = value if value is not None else os.getenv('LOG_LEVEL')

    if not value:
        return logging.WARNING

    assert value in VALID_LVLS, "Log level {} not in valid levels {}".format(value, VALID_LVLS)
    return getattr(logging, value)


def _handlers():
    stream = logging.StreamHandler()
    stream.setFormatter(coloredlogs.ColoredFormatter(format, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES))
    handlers = [stream]

    log_dir = os.getenv('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE), delay=True)
        file_handler.setFormatter(logging.Formatter(format))
        handlers.append(file_handler)

    return handlers


_root = logging.getLogger('custody')


def get_logger(name=''):
    # All registry loggers hang off one parent that owns the handlers
    if not _root.handlers:
        for handler in _handlers():
            _root.addHandler(handler)
        _root.propagate = False

    log = _root.getChild(name) if name else _root
    log.setLevel(level_from_env())

    return log
