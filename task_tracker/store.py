"""In-memory task storage.

Records live only as long as the process. Lookups return None when no record
matches; callers decide how to report that.
"""

import logging
from threading import Lock

from task_tracker.models import Task, TaskRecord, TaskStatus, TaskUpdate

logger = logging.getLogger(__name__)

PLACEHOLDER_TASK = Task(
    title="Lorem ipsum",
    description="Lorem ipsum dolor sit amet",
    status=TaskStatus.NOT_DONE,
)


class TaskStore:
    """Ordered in-memory task storage with monotonically increasing ids."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        # dicts keep insertion order, and reassigning a key keeps its slot
        self._tasks: dict[int, TaskRecord] = {}
        self._next_id = 1
        self._lock = Lock()

    def list_all(self) -> list[TaskRecord]:
        """Return all tasks in creation order."""
        with self._lock:
            return list(self._tasks.values())

    def get(self, task_id: int) -> TaskRecord | None:
        """Get a task by its ID, or None if not found."""
        with self._lock:
            return self._tasks.get(task_id)

    def create(self, data: Task) -> TaskRecord:
        """Create a new task and return it."""
        with self._lock:
            task = TaskRecord(id=self._next_id, **data.model_dump())
            self._tasks[task.id] = task
            self._next_id += 1
        logger.info("Created task %d", task.id)
        return task

    def seed(self, count: int) -> list[TaskRecord]:
        """Create ``count`` placeholder tasks and return them in order."""
        if count < 0:
            raise ValueError(f"cannot seed a negative number of tasks: {count}")
        return [self.create(PLACEHOLDER_TASK) for _ in range(count)]

    def update(self, task_id: int, data: TaskUpdate) -> TaskRecord | None:
        """Update an existing task. Returns None if not found."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None

            update_data = data.model_dump(exclude_unset=True, exclude_none=True)
            if update_data:
                updated_task = task.model_copy(update=update_data)
                self._tasks[task_id] = updated_task
                return updated_task
            return task

    def delete(self, task_id: int) -> TaskRecord | None:
        """Delete a task. Returns the removed task, or None if not found."""
        with self._lock:
            task = self._tasks.pop(task_id, None)
        if task is not None:
            logger.info("Deleted task %d", task_id)
        return task
