# recruitment/routes/candidate_routes.py
from flask import Blueprint, request

import recruitment.databases as databases
from recruitment.errors import InvalidUploadError
from recruitment.permissions import CREATE, DELETE, READ, UPDATE, permission_required
from recruitment.routes.helpers import parse_body, query_int
from recruitment.schemas import (
    DocumentCreate,
    DocumentUpdate,
    HireRequest,
    NotifyRequest,
    ScoreUpdate,
    StageUpdate,
    StatusWithReason,
)
from recruitment.services import DocumentService, HiringService, OfferService, RecruitmentService
from recruitment.services.documents import save_upload
from recruitment.utils import response

candidates_bp = Blueprint("candidates", __name__)


@candidates_bp.route("/candidates", methods=["GET"])
@permission_required(READ)
def list_all_candidates():
    candidates = RecruitmentService.list_all_candidates(
        take=query_int("take", 50),
        skip=query_int("skip", 0),
        stage=request.args.get("stage"),
        date_from=request.args.get("from"),
        date_to=request.args.get("to"),
    )
    return response.success([databases.candidate_to_dict(c, include_job=True) for c in candidates])


@candidates_bp.route("/candidates/<candidate_id>/stage", methods=["PUT"])
@permission_required(UPDATE)
def update_candidate_stage(candidate_id):
    payload = parse_body(StageUpdate)
    candidate = HiringService.update_candidate_stage(candidate_id, payload.stage)
    return response.success(databases.candidate_to_dict(candidate), "Stage updated")


@candidates_bp.route("/candidates/<candidate_id>/status", methods=["POST"])
@permission_required(UPDATE)
def update_candidate_status_with_reason(candidate_id):
    payload = parse_body(StatusWithReason)
    candidate = HiringService.update_candidate_status_with_reason(candidate_id, payload.stage, payload.reason)
    return response.success(databases.candidate_to_dict(candidate), "Status updated")


@candidates_bp.route("/candidates/<candidate_id>/hire", methods=["POST"])
@permission_required(UPDATE)
def hire_candidate(candidate_id):
    payload = parse_body(HireRequest)
    employee = HiringService.hire_candidate(
        candidate_id,
        job_type=payload.job_type,
        start_date=payload.start_date,
        salary=payload.salary,
        manager_id=payload.manager_id,
    )
    return response.success({"employee": databases.employee_to_dict(employee)}, "Candidate hired", 201)


@candidates_bp.route("/candidates/<candidate_id>", methods=["DELETE"])
@permission_required(DELETE)
def delete_candidate(candidate_id):
    result = RecruitmentService.delete_candidate(candidate_id)
    return response.success(result)


@candidates_bp.route("/candidates/<candidate_id>/score", methods=["PUT"])
@permission_required(UPDATE)
def set_candidate_score(candidate_id):
    payload = parse_body(ScoreUpdate)
    candidate = RecruitmentService.set_candidate_score(candidate_id, payload.score)
    return response.success(databases.candidate_to_dict(candidate))


@candidates_bp.route("/candidates/<candidate_id>/notify", methods=["POST"])
@permission_required(UPDATE)
def notify_candidate(candidate_id):
    payload = parse_body(NotifyRequest)
    result = OfferService.notify_candidate(candidate_id, payload.subject, payload.message, payload.channel)
    return response.success(result)


# ==================== DOCUMENTS ====================

@candidates_bp.route("/candidates/<candidate_id>/documents", methods=["GET"])
@permission_required(READ)
def get_candidate_documents(candidate_id):
    documents = DocumentService.list_documents(candidate_id)
    return response.success([databases.candidate_document_to_dict(d) for d in documents])


@candidates_bp.route("/candidates/<candidate_id>/documents", methods=["POST"])
@permission_required(CREATE)
def add_candidate_document(candidate_id):
    payload = parse_body(DocumentCreate)
    document = DocumentService.add_document(candidate_id, **payload.model_dump())
    return response.success(databases.candidate_document_to_dict(document), "Document added successfully")


@candidates_bp.route("/candidates/<candidate_id>/documents/upload", methods=["POST"])
@permission_required(CREATE)
def upload_candidate_document(candidate_id):
    file = request.files.get("file")
    if file is None:
        raise InvalidUploadError("No 'file' found in request")
    return response.success({"fileUrl": save_upload(file)})


@candidates_bp.route("/candidates/<candidate_id>/documents/<document_id>", methods=["PUT"])
@permission_required(UPDATE)
def update_candidate_document(candidate_id, document_id):
    changes = parse_body(DocumentUpdate).model_dump(exclude_unset=True)
    document = DocumentService.update_document(document_id, **changes)
    return response.success(databases.candidate_document_to_dict(document), "Document updated successfully")


@candidates_bp.route("/candidates/<candidate_id>/documents/<document_id>", methods=["DELETE"])
@permission_required(DELETE)
def remove_candidate_document(candidate_id, document_id):
    result = DocumentService.remove_document(document_id)
    return response.success(result, "Document removed successfully")
