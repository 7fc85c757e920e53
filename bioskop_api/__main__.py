"""Serve the API with uvicorn: ``python -m bioskop_api``.

Host and port come from settings (HOST/PORT environment variables,
defaults 0.0.0.0:8080).
"""

import uvicorn

from bioskop_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bioskop_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
