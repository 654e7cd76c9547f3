# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from cookbook.shared.logging import logger


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Yield a session that commits when the block exits cleanly and rolls back otherwise."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception as exc:
        logger.debug(f"uow: rollback ({type(exc).__name__})")
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["unit_of_work_scope"]
