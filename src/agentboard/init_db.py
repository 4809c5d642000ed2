"""Create the board's tables on the configured database.

Run with ``python -m agentboard.init_db``. Managed deployments should prefer
the Alembic migrations under ``migrations/``.
"""

import logging

from agentboard.core.logging import configure_logging
from agentboard.core.settings import settings
from agentboard.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    configure_logging(settings.log_level)
    init_db()
    logger.info("Database initialized.")
