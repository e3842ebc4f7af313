# lsfiles/__init__.py
"""lsfiles: recursively list the files under a directory."""
import logging
import structlog

__version__ = "0.1.0"

# silent unless the application configures logging (the CLI does through configure_logging).
logging.getLogger("lsfiles").addHandler(logging.NullHandler())
if not structlog.is_configured():
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

from lsfiles.config.settings import TraversalConfig, DEFAULT_IGNORED
from lsfiles.core.traversal import iter_files, list_files

__all__ = ["__version__", "TraversalConfig", "DEFAULT_IGNORED", "iter_files", "list_files"]
