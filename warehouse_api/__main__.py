"""Run the service: ``python -m warehouse_api``."""

import uvicorn

from warehouse_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "warehouse_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.is_development else "info",
    )


if __name__ == "__main__":
    main()
