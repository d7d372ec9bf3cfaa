"""Helpers shared by the SQLAlchemy repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from fitmaster.core.errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Turn driver/ORM failures into StoreError so callers see one error type."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store failure while trying to %s", action)
        raise StoreError(f"Could not {action}") from exc
