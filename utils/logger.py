import logging

LOG_LEVELS = ("debug", "info", "warn", "error", "fatal", "panic")

_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def parse_level(name: str) -> int:
    try:
        return _LEVEL_MAP[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name}") from None


def configure_logging(level_name: str = "info") -> int:
    level = parse_level(level_name)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        force=True,
    )
    if level > logging.DEBUG:
        logging.getLogger("aiogram.event").setLevel(logging.WARNING)
    logging.info("📝 Logging initialized (%s)", logging.getLevelName(level))
    return level
