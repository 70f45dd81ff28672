# taskapi/db/init_db.py
import logging

from sqlalchemy.engine import Engine

from taskapi.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """Create any missing tables; existing ones are left untouched."""
    Base.metadata.create_all(bind=bind)
    logger.info("database schema ready (%s)", bind.url.render_as_string(hide_password=True))
