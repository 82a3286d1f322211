"""Database bootstrapping utilities."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from assetview.core.config import get_settings
from assetview.core.security import get_password_hash
from assetview.db import session as db_session
from assetview.models import Asset, AssetExif, User  # noqa: F401 - ensure table registration
from assetview.models.base import Base

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all database tables if they do not exist and seed the administrator."""
    Base.metadata.create_all(bind=db_session.engine)

    session = db_session.SessionLocal()
    try:
        _seed_admin(session)
        session.commit()
    except Exception:  # pragma: no cover - initialization failures should surface
        session.rollback()
        logger.exception("Failed to seed default data during database initialization")
        raise
    finally:
        session.close()


def _seed_admin(db: Session) -> None:
    """Ensure the default administrator account exists."""
    settings = get_settings()
    admin = (
        db.query(User)
        .filter(User.username == settings.default_admin_username, User.is_deleted.is_(False))
        .first()
    )
    if admin is not None:
        return
    db.add(
        User(
            username=settings.default_admin_username,
            hashed_password=get_password_hash(settings.default_admin_password),
            nickname="Administrator",
            is_active=True,
        )
    )
    db.flush()
    logger.info("Seeded default administrator %s", settings.default_admin_username)
