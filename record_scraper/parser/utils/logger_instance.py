import logging
import os
from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()

TRACE = 5

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").split(",")[0].strip().upper()
level_mapping = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}
logging.addLevelName(TRACE, "TRACE")

logger = logging.getLogger("record_scraper")
logger.setLevel(level_mapping.get(LOG_LEVEL, logging.INFO))
if not logger.handlers:
    _handler = RichHandler(rich_tracebacks=True, show_path=False)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
