"""FastAPI application entry point."""

import os
from dotenv import load_dotenv

# Must run before settings are read
load_dotenv()

from api.app import create_app
from api.config import load_settings
from utils.logging import setup_structured_logging

setup_structured_logging()

app = create_app(load_settings())


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs (via our structured logging) replace uvicorn's access log
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
