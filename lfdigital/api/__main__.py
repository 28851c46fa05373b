"""Run the API server: `python -m lfdigital.api`."""

import uvicorn

from lfdigital.api.dependencies import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "lfdigital.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
    )
