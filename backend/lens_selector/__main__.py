"""Run the service: python -m lens_selector"""

import uvicorn

from lens_selector.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "lens_selector.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
