"""Run the Task Tracker API with uvicorn.

Launch:
    python -m task_tracker
    task-tracker
"""

import logging

import uvicorn

from task_tracker.config import configure_logging, load_settings
from task_tracker.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings, build the app and serve it until interrupted."""
    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings=settings)
    if settings.seed_tasks:
        logger.info("Seeded %d placeholder tasks", settings.seed_tasks)

    logger.info("Starting server on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
