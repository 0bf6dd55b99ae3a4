"""Base SQLAlchemy declarative base for all models"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base


def utcnow() -> datetime:
    """Timezone-aware current time used for created/updated columns."""
    return datetime.now(timezone.utc)


Base = declarative_base()
