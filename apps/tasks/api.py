"""
Tasks API endpoints.

CRUD over task records. Every route goes through the auth gate
(apps.identity.gate.task_access); domain errors raised below are turned
into responses by the handlers registered in config/urls.py.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router

from apps.identity.gate import task_access
from . import services
from .dtos import TaskCreateIn, TaskOut, TaskUpdateIn
from .services import UNSET

router = Router(tags=["Tasks"], auth=task_access)


@router.get("", response={200: List[TaskOut]})
def list_tasks_api(request: HttpRequest):
    """List every task."""
    return services.list_tasks()


@router.get("/{int:task_id}", response={200: TaskOut})
def get_task_api(request: HttpRequest, task_id: int):
    return services.get_task(task_id)


@router.post("", response={201: TaskOut})
def create_task_api(request: HttpRequest, payload: TaskCreateIn):
    """
    Create a task.

    Body: {"title": "..."}. New tasks start with completed=false.
    """
    return services.create_task(payload.title)


@router.put("/{int:task_id}", response={200: TaskOut})
def update_task_api(request: HttpRequest, task_id: int, payload: TaskUpdateIn):
    """
    Partially update a task.

    Body: {"title"?: "...", "completed"?: true|false}. Omitted fields
    keep their current value.
    """
    changes = payload.dict(exclude_unset=True)
    return services.update_task(
        task_id,
        raw_title=changes.get('title', UNSET),
        completed=changes.get('completed', UNSET),
    )


@router.delete("/{int:task_id}", response={204: None})
def delete_task_api(request: HttpRequest, task_id: int):
    services.delete_task(task_id)
