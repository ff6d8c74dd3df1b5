"""Application entry point."""

import uvicorn

from todo_mapper.config import get_settings


def run() -> None:
    """Run the API using uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "todo_mapper.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )


# For direct execution
if __name__ == "__main__":
    run()
