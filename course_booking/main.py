import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_booking.core.config import CORS_ORIGINS, LOG_LEVEL, validate_runtime_config
from course_booking.core.errors import register_error_handlers
from course_booking.core.logging_middleware import LoggingMiddleware
from course_booking.db.init_db import init_db
from course_booking.routers.courses import router as courses_router
from course_booking.routers.enrollments import router as enrollments_router
from course_booking.routers.news import router as news_router
from course_booking.routers.users import router as users_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Course Booking API")

# Middleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    validate_runtime_config()
    init_db()


# Include routers
app.include_router(users_router, prefix="/users", tags=["users"])
app.include_router(courses_router, prefix="/courses", tags=["courses"])
app.include_router(enrollments_router, prefix="/enrollments", tags=["enrollments"])
app.include_router(news_router, prefix="/news", tags=["news"])
