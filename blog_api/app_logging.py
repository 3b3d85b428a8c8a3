"""Root logger setup."""

import logging

from pythonjsonlogger import jsonlogger

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logger(env: str = 'local', level: int = logging.INFO) -> None:
    """
    Install a stream handler on the root logger.

    ``dev`` and ``prod`` log one JSON object per line, including any
    ``extra`` fields; ``local`` logs plain text. Calling this again replaces
    the handler installed by the previous call.
    """
    handler = logging.StreamHandler()
    if env in ('dev', 'prod'):
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            FORMAT,
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        )
    else:
        formatter = logging.Formatter(FORMAT)
    handler.setFormatter(formatter)
    handler.set_name('blog_api')

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == 'blog_api':
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
