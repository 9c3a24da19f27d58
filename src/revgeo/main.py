import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from revgeo.shared.config import settings
from revgeo.shared.constants import DEV_PORT


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    port = int(os.environ.get("PORT", DEV_PORT))
    print(f"Starting RevGeo Reverse Geocoding API on port {port}...")
    uvicorn.run("revgeo.api.server:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
