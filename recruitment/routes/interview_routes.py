from flask import Blueprint, request

import recruitment.databases as databases
from recruitment.permissions import CREATE, DELETE, READ, UPDATE, permission_required
from recruitment.routes.helpers import parse_body, query_int
from recruitment.schemas import InterviewCreate, InterviewUpdate
from recruitment.services import InterviewService
from recruitment.utils import response

interviews_bp = Blueprint("interviews", __name__)


@interviews_bp.route("/interviews", methods=["GET"])
@permission_required(READ)
def list_all_interviews():
    interviews = InterviewService.list_all_interviews(
        take=query_int("take", 50),
        skip=query_int("skip", 0),
        status=request.args.get("status"),
        date_from=request.args.get("from"),
        date_to=request.args.get("to"),
    )
    return response.success([databases.interview_to_dict(i) for i in interviews])


@interviews_bp.route("/interviews", methods=["POST"])
@permission_required(CREATE)
def schedule_interview():
    payload = parse_body(InterviewCreate).model_dump()
    interview = InterviewService.schedule_interview(**payload)
    return response.success(databases.interview_to_dict(interview), "Interview scheduled", 201)


@interviews_bp.route("/interviews/<interview_id>", methods=["PUT"])
@permission_required(UPDATE)
def update_interview(interview_id):
    changes = parse_body(InterviewUpdate).model_dump(exclude_unset=True)
    interview = InterviewService.update_interview(interview_id, **changes)
    return response.success(databases.interview_to_dict(interview), "Interview updated")


@interviews_bp.route("/interviews/<interview_id>", methods=["DELETE"])
@permission_required(DELETE)
def delete_interview(interview_id):
    InterviewService.delete_interview(interview_id)
    return "", 204


@interviews_bp.route("/candidates/<candidate_id>/interviews", methods=["GET"])
@permission_required(READ)
def list_interviews_for_candidate(candidate_id):
    interviews = InterviewService.list_interviews_for_candidate(candidate_id)
    return response.success([databases.interview_to_dict(i) for i in interviews])
