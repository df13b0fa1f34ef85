"""Serve the guides service with uvicorn.

Run with:
    python -m guides_api
"""

import uvicorn

from guides_api.config import Settings


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(
        "guides_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
