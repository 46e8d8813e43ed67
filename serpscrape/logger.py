import sys
from datetime import datetime
from typing import Optional

from loguru import logger as _logger # Renamed to avoid conflict with the global logger
from serpscrape.config import config

_print_level = "INFO"

def define_log_level(print_level: Optional[str] = None, logfile_level: Optional[str] = None, name: str = "serpscrape"):
    """Adjust the log level to above level"""
    global _print_level
    settings = config.logging
    print_level = print_level or settings.print_level
    logfile_level = logfile_level or settings.logfile_level
    _print_level = print_level

    _logger.remove()
    _logger.add(sys.stderr, level=print_level)

    if settings.file_logging:
        formatted_date = datetime.now().strftime("%Y%m%d%H%M%S")
        log_name = f"{name}_{formatted_date}" if name else formatted_date
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        _logger.add(settings.log_dir / f"{log_name}.log", level=logfile_level)
    return _logger

logger = define_log_level()
