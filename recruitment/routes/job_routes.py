# recruitment/routes/job_routes.py
from flask import Blueprint, request

import recruitment.databases as databases
from recruitment.permissions import CREATE, DELETE, READ, UPDATE, permission_required
from recruitment.routes.helpers import parse_body, query_bool
from recruitment.schemas import CandidateCreate, JobPostingCreate, JobPostingUpdate, ShortlistRequest
from recruitment.services import RecruitmentService
from recruitment.utils import response

jobs_bp = Blueprint("jobs", __name__)


@jobs_bp.route("/jobs", methods=["GET"])
@permission_required(READ)
def list_job_postings():
    jobs = RecruitmentService.list_job_postings(q=request.args.get("q"), is_active=query_bool("isActive"))
    return response.success([databases.job_posting_to_dict(j) for j in jobs])


@jobs_bp.route("/jobs", methods=["POST"])
@permission_required(CREATE)
def create_job_posting():
    payload = parse_body(JobPostingCreate)
    job = RecruitmentService.create_job_posting(
        payload.title,
        payload.description,
        payload.department_id,
        is_active=payload.is_active,
        skills=[s.model_dump() for s in payload.skills],
    )
    return response.success(databases.job_posting_to_dict(job), "Job posting created", 201)


@jobs_bp.route("/jobs/<job_id>", methods=["GET"])
@permission_required(READ)
def get_job_posting(job_id):
    job = RecruitmentService.get_job_posting(job_id)
    return response.success(databases.job_posting_to_dict(job, include_candidates=True))


@jobs_bp.route("/jobs/<job_id>", methods=["PUT"])
@permission_required(UPDATE)
def update_job_posting(job_id):
    changes = parse_body(JobPostingUpdate).model_dump(exclude_unset=True)
    job = RecruitmentService.update_job_posting(job_id, **changes)
    return response.success(databases.job_posting_to_dict(job, include_candidates=True), "Job posting updated")


@jobs_bp.route("/jobs/<job_id>/archive", methods=["PATCH"])
@permission_required(UPDATE)
def archive_job_posting(job_id):
    RecruitmentService.archive_job_posting(job_id)
    return "", 204


@jobs_bp.route("/jobs/<job_id>", methods=["DELETE"])
@permission_required(DELETE)
def delete_job_posting(job_id):
    RecruitmentService.delete_job_posting(job_id)
    return "", 204


@jobs_bp.route("/jobs/<job_id>/generate-link", methods=["POST"])
@permission_required(READ)
def generate_public_link(job_id):
    job = RecruitmentService.generate_public_token(job_id)
    return response.success(databases.job_posting_to_dict(job), "Public link generated successfully")


@jobs_bp.route("/jobs/<job_id>/candidates", methods=["GET"])
@permission_required(READ)
def list_candidates_for_job(job_id):
    candidates = RecruitmentService.list_candidates_for_job(job_id)
    return response.success([databases.candidate_to_dict(c) for c in candidates])


@jobs_bp.route("/jobs/<job_id>/candidates", methods=["POST"])
@permission_required(CREATE)
def create_candidate_for_job(job_id):
    payload = parse_body(CandidateCreate)
    candidate = RecruitmentService.create_candidate_for_job(job_id, payload.model_dump())
    return response.success(databases.candidate_to_dict(candidate), "Candidate created", 201)


@jobs_bp.route("/jobs/<job_id>/shortlist", methods=["POST"])
@permission_required(UPDATE)
def shortlist_candidates(job_id):
    payload = parse_body(ShortlistRequest)
    result = RecruitmentService.shortlist_candidates(job_id, min_score=payload.criteria.min_score)
    result["candidates"] = [databases.candidate_to_dict(c) for c in result["candidates"]]
    return response.success(result)


@jobs_bp.route("/kpis", methods=["GET"])
@permission_required(READ)
def get_recruitment_kpis():
    data = RecruitmentService.get_recruitment_kpis(
        date_from=request.args.get("from"),
        date_to=request.args.get("to"),
    )
    return response.success(data)
