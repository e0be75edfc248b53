from __future__ import annotations

import uvicorn

from crmdesk.core.config import settings


def main() -> None:
    uvicorn.run(
        "crmdesk.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.app_log_level.lower(),
        reload=settings.app_debug,
    )


if __name__ == "__main__":
    main()
