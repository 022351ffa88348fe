#!/usr/bin/env python3
"""Start the space builder API with uvicorn (host/port from config)."""
import os

import uvicorn

from spacegen.api.dependencies import get_config

if __name__ == "__main__":
    config = get_config()
    uvicorn.run(
        "spacegen.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
        # SSE streams are long-lived; reload only when asked
        reload=os.getenv("SPACEGEN_RELOAD", "").lower() in ("1", "true"),
    )
