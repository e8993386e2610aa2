# tasktracker/services/task_store.py

import logging
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Durable CRUD primitives over the task table.

    The store is built from an explicit Flask-SQLAlchemy handle and must be
    used inside an application context. Every call commits or rolls back its
    own unit of work; the session is released when the context tears down.
    Any SQLAlchemy failure is raised as StorageError.
    """

    def __init__(self, db):
        self._db = db

    @property
    def _session(self):
        return self._db.session

    def _fail(self, action: str) -> StorageError:
        try:
            self._session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed %s also failed", action)
        return StorageError(f"Failed to {action}")

    def create_schema(self) -> None:
        try:
            self._db.create_all()
        except SQLAlchemyError as e:
            raise self._fail("create schema") from e
        logger.info("Task schema ready")

    def insert(self, title: str, description: str) -> Task:
        task = Task(title=title, description=description, status=False)
        try:
            self._session.add(task)
            self._session.commit()
            # created_at is assigned by the database
            self._session.refresh(task)
        except SQLAlchemyError as e:
            raise self._fail("insert task") from e
        logger.debug("Task inserted id=%s", task.id)
        return task

    def list_pending(self, limit: int) -> List[Task]:
        stmt = (
            sa.select(Task)
            .where(Task.status.is_(False))
            .order_by(Task.created_at.desc(), Task.id.desc())
            .limit(int(limit))
        )
        try:
            return list(self._session.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise self._fail("list pending tasks") from e

    def get(self, task_id: int) -> Optional[Task]:
        try:
            return self._session.get(Task, int(task_id))
        except SQLAlchemyError as e:
            raise self._fail("load task") from e

    def mark_done(self, task_id: int) -> bool:
        """Set status=true for the row. Returns whether the row existed."""
        try:
            task = self._session.get(Task, int(task_id))
            if task is None:
                return False
            task.status = True
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("mark task done") from e
        return True

    def clear(self) -> int:
        """Delete every row. Test-support hook, not exposed over HTTP."""
        try:
            result = self._session.execute(sa.delete(Task))
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("clear tasks") from e
        logger.info("Task table cleared rows=%s", result.rowcount)
        return result.rowcount
