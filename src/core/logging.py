import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거 설정. 알 수 없는 레벨 이름은 INFO로 대체."""
    resolved = logging.getLevelName(level.upper())
    unknown = not isinstance(resolved, int)
    logging.basicConfig(
        level=logging.INFO if unknown else resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    if unknown:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, falling back to INFO", level
        )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
