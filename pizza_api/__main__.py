"""
Run the API with uvicorn:
  python -m pizza_api
Listens on 127.0.0.1:8080 with two worker processes unless HOST/PORT/WORKERS say otherwise.
"""

import uvicorn

from pizza_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "pizza_api.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
