"""Pydantic models for the Task Tracker API."""

from enum import Enum

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Progress of a task, as written on the wire."""

    DONE = "done"
    NOT_DONE = "not done"
    IN_PROGRESS = "in progress"


class Task(BaseModel):
    """Request body for creating a new task."""

    title: str = Field(..., description="The task title")
    description: str = Field(..., description="Longer description of the work")
    status: TaskStatus = Field(..., description="Current progress of the task")


class TaskUpdate(BaseModel):
    """Request body for partially updating a task.

    Fields that are left out (or sent as null) keep their stored value.
    """

    title: str | None = Field(default=None, description="New title for the task")
    description: str | None = Field(default=None, description="New description")
    status: TaskStatus | None = Field(default=None, description="New status")


class TaskRecord(BaseModel):
    """A stored task together with its assigned id."""

    id: int = Field(..., description="Unique identifier, never reused")
    title: str
    description: str
    status: TaskStatus
