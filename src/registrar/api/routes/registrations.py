"""Registration, schedule and completion endpoints."""

from fastapi import APIRouter, Response, status

from registrar.accounts import (
    can_enter_grades,
    can_manage_courses,
    can_register,
    can_review_admissions,
    can_view_own_grades,
    require,
    require_own_record,
)
from registrar.api.dependencies import ActorDep, RegistrarDep
from registrar.api.models import (
    APIResponse,
    CompletionCreate,
    CompletionResponse,
    EnrollmentResponse,
    RegistrationRequest,
    RegistrationResponse,
    completion_to_response,
    enrollment_to_response,
    registration_to_response,
)
from registrar.registration import RegistrationFailure

router = APIRouter(tags=["registrations"])

FAILURE_STATUS = {
    RegistrationFailure.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    RegistrationFailure.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RegistrationFailure.COURSE_FULL: status.HTTP_409_CONFLICT,
    RegistrationFailure.ALREADY_ENROLLED: status.HTTP_409_CONFLICT,
    RegistrationFailure.MISSING_PREREQUISITE: status.HTTP_409_CONFLICT,
}


@router.post(
    "/registrations",
    response_model=APIResponse[RegistrationResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    request: RegistrationRequest, registrar: RegistrarDep, actor: ActorDep, response: Response
) -> APIResponse[RegistrationResponse]:
    """Attempt to register a student in a course.

    Students register themselves; admins may register any student.
    """
    require_own_record(can_register, actor, request.username, staff=can_manage_courses)
    result = registrar.registration.register(request.username, request.course_code)
    if result.ok:
        return APIResponse(data=registration_to_response(result))

    response.status_code = FAILURE_STATUS.get(result.failure, status.HTTP_409_CONFLICT)
    return APIResponse(data=registration_to_response(result), error=result.message)


@router.get(
    "/students/{username}/schedule",
    response_model=APIResponse[list[EnrollmentResponse]],
)
def get_schedule(
    username: str, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List a student's enrollments."""
    require_own_record(can_view_own_grades, actor, username, staff=can_review_admissions)
    enrollments = registrar.ledger.schedule_for(username)
    return APIResponse(data=[enrollment_to_response(e) for e in enrollments])


@router.get(
    "/students/{username}/completions",
    response_model=APIResponse[list[CompletionResponse]],
)
def list_completions(
    username: str, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[list[CompletionResponse]]:
    """List a student's completed courses."""
    require_own_record(can_view_own_grades, actor, username, staff=can_review_admissions)
    completions = registrar.ledger.completions_for(username)
    return APIResponse(data=[completion_to_response(c) for c in completions])


@router.post(
    "/students/{username}/completions",
    response_model=APIResponse[CompletionResponse],
    status_code=status.HTTP_201_CREATED,
)
def record_completion(
    username: str, completion: CompletionCreate, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[CompletionResponse]:
    """Record that a student completed a course."""
    require(can_enter_grades, actor)
    fact = registrar.ledger.record_completion(username, completion.course_code)
    return APIResponse(data=completion_to_response(fact))
