import functools
import logging
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from core.config_loader import settings
from core.errors import BadRequestError, StorageFaultError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _connect_args(url: str) -> dict:
    # sqlite connections are shared with the threadpool that runs sync endpoints
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args(settings.DATABASE_URL), future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    import models_bootstrap  # noqa: F401  registers every table on Base.metadata
    Base.metadata.create_all(engine)


def storage_guard(message: str, integrity_message: Optional[str] = None):
    """Wrap a repository method that uses ``self.db``.

    Any SQLAlchemy failure rolls the session back and is raised as
    StorageFaultError(message). With ``integrity_message`` set, a constraint
    violation is the caller's fault and is raised as BadRequestError instead.
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except IntegrityError as e:
                self.db.rollback()
                if integrity_message is None:
                    logger.error(f"{fn.__qualname__} failed: {e}", exc_info=True)
                    raise StorageFaultError(message) from e
                logger.info(f"{fn.__qualname__} rejected: {e.orig}")
                raise BadRequestError(integrity_message) from e
            except SQLAlchemyError as e:
                logger.error(f"{fn.__qualname__} failed: {e}", exc_info=True)
                self.db.rollback()
                raise StorageFaultError(message) from e
        return wrapper
    return decorator
