import os
import sys
from logging import FileHandler, Formatter, StreamHandler, getLogger

from app.config import config

LOG_FORMAT = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
LOGGER_NAME = "urlsummarizer"


def setup_logging(log_dir=None, level=None, name=LOGGER_NAME):
    """Attach the file and stdout handlers to the named logger once."""
    logger = getLogger(name)
    logger.setLevel(level or config.LOG_LEVEL)
    if logger.handlers:
        return logger

    log_dir = log_dir or config.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    formatter = Formatter(LOG_FORMAT)
    for handler in (FileHandler(os.path.join(log_dir, config.LOG_FILE)), StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


logging = setup_logging()
