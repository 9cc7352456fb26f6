"""Command-line entrypoint that serves the booking app."""

import uvicorn

from class_booking.api.app import create_app
from class_booking.containers import build_container


def main() -> None:
    """Run the booking service with uvicorn on the configured address."""
    container = build_container()
    app = create_app(container)
    uvicorn.run(
        app,
        host=container.settings.host,
        port=container.settings.port,
        log_level=container.settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
