import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.routes import (
    auth,
    courses,
    dashboard,
    health,
    notifications,
    storage,
    students,
    subjects,
    submissions,
)
from app.core.config import get_settings, setup_logging

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)


class UTF8Middleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Content-Type"] = "application/json; charset=utf-8"
        return response


app = FastAPI(title=settings.project_name)

app.add_middleware(UTF8Middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(subjects.router)
app.include_router(courses.router)
app.include_router(submissions.router)
app.include_router(students.router)
app.include_router(dashboard.router)
app.include_router(notifications.router)
app.include_router(storage.router)

logger.info("%s API ready", settings.project_name)
