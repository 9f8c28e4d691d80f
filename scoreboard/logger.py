import logging

_LOGGERS = {}
_CONSOLE = {}

ROOT_NAMESPACE = "scoreboard"


def get_logger(name: str) -> logging.Logger:
    """
    Create or retrieve a named logger under the ``scoreboard`` namespace.

    Only a NullHandler is attached; records propagate to whatever handlers
    the host application configures. Repeated calls return the cached logger.
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(f"{ROOT_NAMESPACE}.{name}")
    logger.addHandler(logging.NullHandler())

    _LOGGERS[name] = logger

    return logger


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Opt-in console output for scripts. Attaches one StreamHandler to the
    ``scoreboard`` namespace logger; later calls only adjust the level.
    """
    logger = logging.getLogger(ROOT_NAMESPACE)
    logger.setLevel(level)

    if ROOT_NAMESPACE in _CONSOLE:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    _CONSOLE[ROOT_NAMESPACE] = console

    return logger
