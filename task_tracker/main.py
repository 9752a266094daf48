"""FastAPI application entry point."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from task_tracker import __version__
from task_tracker.config import Settings
from task_tracker.models import Task, TaskRecord, TaskUpdate
from task_tracker.store import TaskStore

logger = logging.getLogger(__name__)

INDEX_PAGE = Path(__file__).parent / "static" / "index.html"
NOT_FOUND_BODY = "not found"


class TaskNotFoundError(Exception):
    """No stored task matches the requested id."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(f"task {raw_id!r} not found")
        self.raw_id = raw_id


def parse_task_id(raw_id: str) -> int | None:
    """Parse a base-10 path id, or return None if it is not an integer.

    Only ASCII digits with an optional leading minus are accepted, so forms
    such as ``1_0``, ``1.5`` or space-padded ids never match a task.
    """
    digits = raw_id.removeprefix("-")
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw_id)


def get_store(request: Request) -> TaskStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def _found(task: TaskRecord | None, raw_id: str) -> TaskRecord:
    if task is None:
        raise TaskNotFoundError(raw_id)
    return task


router = APIRouter()


@router.get("/", include_in_schema=False)
async def info_page() -> FileResponse:
    """Static page describing the API."""
    return FileResponse(INDEX_PAGE, media_type="text/html")


@router.get("/tasks", response_model=list[TaskRecord], tags=["Tasks"])
async def list_tasks(store: TaskStore = Depends(get_store)) -> list[TaskRecord]:
    """List all tasks."""
    return store.list_all()


@router.post(
    "/tasks",
    response_model=TaskRecord,
    status_code=status.HTTP_201_CREATED,
    tags=["Tasks"],
)
async def create_task(data: Task, store: TaskStore = Depends(get_store)) -> TaskRecord:
    """Create a new task."""
    return store.create(data)


@router.get(
    "/tasks/{task_id}",
    response_model=TaskRecord,
    responses={404: {"content": {"application/json": {"example": NOT_FOUND_BODY}}}},
    tags=["Tasks"],
)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> TaskRecord:
    """Get a specific task by ID."""
    parsed = parse_task_id(task_id)
    task = None if parsed is None else store.get(parsed)
    return _found(task, task_id)


@router.delete(
    "/tasks/{task_id}",
    response_model=TaskRecord,
    responses={404: {"content": {"application/json": {"example": NOT_FOUND_BODY}}}},
    tags=["Tasks"],
)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)) -> TaskRecord:
    """Delete a task, returning the removed value."""
    parsed = parse_task_id(task_id)
    task = None if parsed is None else store.delete(parsed)
    return _found(task, task_id)


@router.patch(
    "/tasks/{task_id}",
    response_model=TaskRecord,
    responses={404: {"content": {"application/json": {"example": NOT_FOUND_BODY}}}},
    tags=["Tasks"],
)
async def update_task(
    task_id: str, data: TaskUpdate, store: TaskStore = Depends(get_store)
) -> TaskRecord:
    """Update only the fields present in the request body."""
    parsed = parse_task_id(task_id)
    task = None if parsed is None else store.update(parsed, data)
    return _found(task, task_id)


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.debug("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY)


def create_app(store: TaskStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around ``store``.

    A fresh store is created when none is given, seeded with
    ``settings.seed_tasks`` placeholder tasks.
    """
    if settings is None:
        settings = Settings()
    if store is None:
        store = TaskStore()
        store.seed(settings.seed_tasks)

    app = FastAPI(
        title="Task Tracker API",
        description="Create, list, fetch, update and delete tasks held in memory.",
        version=__version__,
    )
    app.state.store = store

    # Cross-origin requests are allowed from anywhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.include_router(router)
    return app
