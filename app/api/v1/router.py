from fastapi import APIRouter
from app.api.v1.endpoints import students
from app.api.v1.endpoints import classes

api_router = APIRouter()

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(
    classes.router,
    prefix="/classes",
    tags=["classes"]
)
