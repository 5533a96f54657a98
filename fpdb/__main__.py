"""Run the API server with uvicorn."""

import uvicorn

from fpdb.core import settings


def main() -> None:
    """Serve the application on the configured address."""
    uvicorn.run(
        "fpdb.main:app",
        host=settings.HOST,
        port=settings.PORT,
        timeout_keep_alive=15,
    )


if __name__ == "__main__":
    main()
