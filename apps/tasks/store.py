"""
Task store - the only code that touches the tasks table.

Every operation is a single autocommit statement against the default
database connection (pooled for PostgreSQL). Database failures are
logged with their cause and surfaced as StorageError; a missing row is
NotFound. Callers never see a raw DatabaseError.
"""
import logging
from functools import wraps
from typing import Callable, List

from django.db import DatabaseError

from apps.core.errors import NotFound, StorageError
from .dtos import TaskDTO
from .models import Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({'title', 'completed'})


def _guarded(operation: Callable):
    """Translate DatabaseError into StorageError, keeping the cause in the log only."""
    @wraps(operation)
    def wrapper(*args, **kwargs):
        try:
            return operation(*args, **kwargs)
        except DatabaseError as e:
            logger.exception(f"Task store operation '{operation.__name__}' failed: {e}")
            raise StorageError() from e
    return wrapper


def _to_dto(task: Task) -> TaskDTO:
    return TaskDTO(
        id=task.id,
        title=task.title,
        completed=task.completed,
        created_at=task.created_at,
    )


@_guarded
def create(title: str) -> TaskDTO:
    task = Task.objects.create(title=title, completed=False)
    return _to_dto(task)


@_guarded
def get(task_id: int) -> TaskDTO:
    try:
        return _to_dto(Task.objects.get(id=task_id))
    except Task.DoesNotExist:
        raise NotFound()


@_guarded
def list_all() -> List[TaskDTO]:
    return [_to_dto(task) for task in Task.objects.all()]


@_guarded
def update(task_id: int, **fields) -> TaskDTO:
    """
    Apply only the supplied fields, then read the row back.

    With no fields this is a plain fetch. Concurrent writers to the same
    row resolve last-write-wins.
    """
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise TypeError(f"Cannot update task fields: {', '.join(sorted(unknown))}")

    if fields:
        updated = Task.objects.filter(id=task_id).update(**fields)
        if not updated:
            raise NotFound()

    return get(task_id)


@_guarded
def delete(task_id: int) -> None:
    deleted, _ = Task.objects.filter(id=task_id).delete()
    if not deleted:
        raise NotFound()
