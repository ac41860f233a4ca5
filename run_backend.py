#!/usr/bin/env python3
"""Start the floor plan geometry API server."""

import uvicorn

from floorplan.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "floorplan.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        reload_dirs=["floorplan"],
    )
