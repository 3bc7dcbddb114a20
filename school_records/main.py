import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from school_records.api import (
    attendance,
    courses,
    departments,
    enrollments,
    exams,
    grades,
    homework,
    students,
    submissions,
    teachers,
)
from school_records.core.config import settings
from school_records.core.errors import SchoolRecordsError, StorageError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        from school_records.db.registry import init_db
        from school_records.db.session import engine

        init_db(engine)
    logger.info("%s started", settings.APP_NAME)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Одинаковое отображение ошибок для всех операций, включая create
@app.exception_handler(SchoolRecordsError)
async def handle_service_error(request: Request, exc: SchoolRecordsError):
    if isinstance(exc, StorageError):
        return JSONResponse(status_code=exc.status_code, content={"error": "internal storage error"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Битый id, query-параметр или тело запроса дают 400, а не 422
@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/health")
def health():
    return {"status": "ok"}


prefix = settings.API_PREFIX
app.include_router(departments.router, prefix=f"{prefix}/departments", tags=["departments"])
app.include_router(teachers.router, prefix=f"{prefix}/teachers", tags=["teachers"])
app.include_router(students.router, prefix=f"{prefix}/students", tags=["students"])
app.include_router(courses.router, prefix=f"{prefix}/courses", tags=["courses"])
app.include_router(enrollments.router, prefix=f"{prefix}/enrollments", tags=["enrollments"])
app.include_router(attendance.router, prefix=f"{prefix}/attendance", tags=["attendance"])
app.include_router(homework.router, prefix=f"{prefix}/homework", tags=["homework"])
app.include_router(submissions.router, prefix=f"{prefix}/submissions", tags=["submissions"])
app.include_router(exams.router, prefix=f"{prefix}/exams", tags=["exams"])
app.include_router(grades.router, prefix=f"{prefix}/grades", tags=["grades"])
