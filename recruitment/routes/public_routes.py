# recruitment/routes/public_routes.py
# Applicant-facing endpoints, reachable through the shared link without a login.
from flask import Blueprint, request

import recruitment.databases as databases
from recruitment.routes.helpers import parse_body
from recruitment.schemas import CandidateCreate
from recruitment.services import RecruitmentService
from recruitment.utils import response

public_bp = Blueprint("public", __name__)


@public_bp.route("/public/jobs/<token>", methods=["GET"])
def get_public_job_posting(token):
    job = RecruitmentService.get_job_posting_by_public_token(token)
    return response.success(databases.public_job_posting_to_dict(job))


@public_bp.route("/public/jobs/<token>/apply", methods=["POST"])
def create_public_application(token):
    payload = parse_body(CandidateCreate)
    candidate = RecruitmentService.create_public_application(
        token, payload.model_dump(), resume_file=request.files.get("resume")
    )
    return response.success(databases.candidate_to_dict(candidate), "Application submitted successfully", 201)
