import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.database import close_pool, get_pool
from .core.errors import register_error_handlers
from .core.observability import setup_logging
from .routers import attendance, employees, health, overtime, reports

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    await get_pool()  # Warm pool on startup
    log.info("Attendance API started")
    yield
    await close_pool()
    log.info("Attendance API stopped")


app = FastAPI(
    title="Attendance & Overtime API",
    version="1.0.0",
    lifespan=lifespan,
)

# Exactly one frontend origin, with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(employees.router, tags=["employees"])
app.include_router(attendance.router, tags=["attendance"])
app.include_router(overtime.router, tags=["overtime"])
app.include_router(reports.router, tags=["reports"])
app.include_router(health.router, tags=["health"])


def run():
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
