import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # No-op when the root logger already has handlers; the level still applies.
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
