"""Run the Movies API under uvicorn: ``python -m movies_api``.

Host, port and log level come from Settings (HOST, PORT, LOG_LEVEL).
"""

import uvicorn

from movies_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "movies_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
