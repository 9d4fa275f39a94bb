"""Course catalog endpoints."""

from fastapi import APIRouter, Query, status

from registrar.accounts import can_manage_courses, require
from registrar.api.dependencies import ActorDep, RegistrarDep
from registrar.api.models import (
    APIResponse,
    CourseResponse,
    CourseUpsert,
    course_to_response,
)
from registrar.store import Course, CourseNotFoundError

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(
    registrar: RegistrarDep,
    q: str | None = Query(default=None, description="Match code, title or department"),
) -> APIResponse[list[CourseResponse]]:
    """List courses, optionally filtered by a search term."""
    courses = registrar.catalog.search(q)
    return APIResponse(data=[course_to_response(c) for c in courses])


@router.get("/{code}", response_model=APIResponse[CourseResponse])
def get_course(code: str, registrar: RegistrarDep) -> APIResponse[CourseResponse]:
    """Get a course by code."""
    course = registrar.catalog.get(code)
    if course is None:
        raise CourseNotFoundError(f"Course {code} not found.")
    return APIResponse(data=course_to_response(course))


@router.put("/{code}", response_model=APIResponse[CourseResponse])
def upsert_course(
    code: str, course: CourseUpsert, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[CourseResponse]:
    """Create or replace a course."""
    require(can_manage_courses, actor)
    stored = registrar.catalog.upsert(
        Course(
            code=code,
            title=course.title,
            department=course.department,
            capacity=course.capacity,
            credits=course.credits,
            prerequisites=course.prerequisites,
        )
    )
    return APIResponse(data=course_to_response(stored))


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(code: str, registrar: RegistrarDep, actor: ActorDep) -> None:
    """Delete a course. Existing enrollments keep their copy of the course."""
    require(can_manage_courses, actor)
    if not registrar.catalog.delete(code):
        raise CourseNotFoundError(f"Course {code} not found.")
