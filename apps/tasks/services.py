"""
Services for Tasks app.

Enforces the input rules the store does not, then delegates. Store
outcomes (NotFound, StorageError) propagate unchanged.
"""
import logging
from typing import List

from apps.core.errors import ValidationError
from . import store
from .dtos import TaskDTO

logger = logging.getLogger(__name__)


class _Unset:
    """Marks a field the client did not send, as opposed to an explicit null."""

    def __repr__(self):
        return 'UNSET'


UNSET = _Unset()


def _clean_title(raw_title) -> str:
    if raw_title is None:
        raise ValidationError("title is required")
    if not isinstance(raw_title, str):
        raise ValidationError("title must be a string")
    if not raw_title.strip():
        raise ValidationError("title cannot be empty")
    return raw_title


def create_task(raw_title) -> TaskDTO:
    """Create a task. The title must be present and not blank."""
    title = _clean_title(raw_title)
    task = store.create(title)
    logger.info(f"Created task {task.id}")
    return task


def get_task(task_id: int) -> TaskDTO:
    return store.get(task_id)


def list_tasks() -> List[TaskDTO]:
    return store.list_all()


def update_task(task_id: int, raw_title=UNSET, completed=UNSET) -> TaskDTO:
    """
    Apply a partial update.

    Fields left as UNSET are untouched. An explicit None is rejected for
    both fields: it never clears the title or resets the flag.
    """
    fields = {}
    if raw_title is not UNSET:
        fields['title'] = _clean_title(raw_title)
    if completed is not UNSET:
        if not isinstance(completed, bool):
            raise ValidationError("completed must be a boolean")
        fields['completed'] = completed

    task = store.update(task_id, **fields)
    if fields:
        logger.info(f"Updated task {task_id}: {', '.join(sorted(fields))}")
    return task


def delete_task(task_id: int) -> None:
    store.delete(task_id)
    logger.info(f"Deleted task {task_id}")
