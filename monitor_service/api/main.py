"""Process entrypoint that serves the API with uvicorn."""

from __future__ import annotations

import uvicorn

from monitor_service.common.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "monitor_service.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
