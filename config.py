import logging
import sys


class Config:
    APP_TITLE = "Campus Lost and Found System"
    DATE_FORMAT = "%Y-%m-%d"

    # Diagnostics go to stderr; keep them quiet so the menu stays readable.
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # The console session acts on behalf of this operator.
    OPERATOR_NAME = "Front Desk"
    OPERATOR_CONTACT = "lostandfound@campus.edu"
    OPERATOR_IS_ADMIN = True


def configure_logging(config=Config) -> None:
    """Install a single stderr handler on the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    root_logger.addHandler(console_handler)

    logging.debug("Logging configured: level=%s", config.LOG_LEVEL)
