"""Admissions endpoints."""

from fastapi import APIRouter, Query, status

from registrar.accounts import can_apply, can_review_admissions, require
from registrar.api.dependencies import ActorDep, RegistrarDep
from registrar.api.models import (
    APIResponse,
    ApplicantCreate,
    ApplicantResponse,
    DecisionRequest,
    DecisionResponse,
    SubmissionResponse,
    applicant_to_response,
)
from registrar.store import ApplicantNotFoundError, ApplicationStatus

router = APIRouter(prefix="/applicants", tags=["admissions"])


@router.post(
    "",
    response_model=APIResponse[SubmissionResponse],
    status_code=status.HTTP_201_CREATED,
)
def submit_application(
    application: ApplicantCreate, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[SubmissionResponse]:
    """Submit an application."""
    require(can_apply, actor)
    applicant_id = registrar.admissions.submit(
        application.first_name.strip(),
        application.last_name.strip(),
        application.submitted_at,
    )
    return APIResponse(
        data=SubmissionResponse(
            id=applicant_id,
            status=ApplicationStatus.SUBMITTED,
            message=f"Application submitted (ID #{applicant_id}). Status: Submitted.",
        )
    )


@router.get("", response_model=APIResponse[list[ApplicantResponse]])
def list_applicants(
    registrar: RegistrarDep,
    actor: ActorDep,
    last_name: str | None = Query(default=None, description="Exact last name, any case"),
) -> APIResponse[list[ApplicantResponse]]:
    """List applications, optionally by last name."""
    require(can_review_admissions, actor)
    if last_name is not None:
        applicants = registrar.admissions.list_by_last_name(last_name)
    else:
        applicants = registrar.admissions.list_all()
    return APIResponse(data=[applicant_to_response(a) for a in applicants])


@router.get("/{applicant_id}", response_model=APIResponse[ApplicantResponse])
def get_applicant(
    applicant_id: int, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[ApplicantResponse]:
    """Get an application by id."""
    require(can_review_admissions, actor)
    applicant = registrar.admissions.get(applicant_id)
    if applicant is None:
        raise ApplicantNotFoundError(f"Application #{applicant_id} not found.")
    return APIResponse(data=applicant_to_response(applicant))


@router.post("/{applicant_id}/decision", response_model=APIResponse[DecisionResponse])
def decide_application(
    applicant_id: int, decision: DecisionRequest, registrar: RegistrarDep, actor: ActorDep
) -> APIResponse[DecisionResponse]:
    """Accept or reject an application."""
    reviewer = require(can_review_admissions, actor)
    if not registrar.admissions.decide(applicant_id, decision.status):
        raise ApplicantNotFoundError(f"Application #{applicant_id} not found.")
    return APIResponse(
        data=DecisionResponse(
            id=applicant_id,
            status=decision.status,
            message=f"{reviewer.username} marked application #{applicant_id} {decision.status}.",
        )
    )
