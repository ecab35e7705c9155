import logging
import os
import sys

import uvicorn

from api.app import create_app
from infrastructure.config import load_server_config

# -------------------------------
# Logging
# -------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# -------------------------------
# FastAPI app
# -------------------------------

config = load_server_config()
app = create_app(config)


if __name__ == "__main__":
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
