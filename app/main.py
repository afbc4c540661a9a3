from fastapi import FastAPI
import logging
import uvicorn

from app.api.metrics import router as metrics_router
from app.api.table import router as table_router
from app.api.health import router as health_router
from app.deps.common import get_settings
from core.logging import setup_json_logging

settings = get_settings()

# Setup logging
setup_json_logging(settings.log_level_value)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")

# Include routers
app.include_router(health_router)  # Health at root level
app.include_router(metrics_router, prefix="/api/v1")
app.include_router(table_router, prefix="/api/v1")


def run() -> None:
    """Serve the API with uvicorn (`reaction-insights-api` console script)"""
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)


if __name__ == "__main__":
    run()
