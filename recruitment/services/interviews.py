# recruitment/services/interviews.py
import logging

import recruitment.databases as databases
from recruitment.errors import (
    CandidateNotFoundError,
    InterviewerNotFoundError,
    InterviewNotFoundError,
)
from recruitment.extensions import db
from recruitment.unit_of_work import atomic
from recruitment.utils.dates import date_range, to_datetime

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "date", "duration", "type", "location", "meeting_link",
    "notes", "feedback", "rating", "status",
)
# NOT NULL columns: a None here means "leave unchanged"
REQUIRED_FIELDS = ("date", "type", "status")


class InterviewService:
    """Interview scheduling. Independent from the candidate's stage."""

    @staticmethod
    def schedule_interview(candidate_id, date, interviewer_id=None, type=None, **details):
        with atomic():
            if not databases.get_candidate_by_id(candidate_id):
                raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")
            if interviewer_id and not databases.get_employee_by_id(interviewer_id):
                raise InterviewerNotFoundError(f"Interviewer with ID {interviewer_id} not found")

            interview = databases.create_interview(
                candidate_id=candidate_id,
                interviewer_id=interviewer_id or None,
                date=to_datetime(date),
                type=type or "VIDEO",
                duration=details.get("duration"),
                location=details.get("location"),
                meeting_link=details.get("meeting_link"),
                notes=details.get("notes"),
                feedback=details.get("feedback") or None,
                rating=details.get("rating") or None,
            )

        logger.info(f"📅 Interview {interview.id} scheduled for candidate {candidate_id}")
        return interview

    @staticmethod
    def update_interview(interview_id, **changes):
        with atomic():
            interview = InterviewService.get_interview(interview_id)
            for field in UPDATABLE_FIELDS:
                if field not in changes:
                    continue
                value = changes[field]
                if value is None and field in REQUIRED_FIELDS:
                    continue
                if field == "date":
                    value = to_datetime(value)
                setattr(interview, field, value)
        return interview

    @staticmethod
    def get_interview(interview_id):
        interview = databases.get_interview_by_id(interview_id)
        if not interview:
            raise InterviewNotFoundError(f"Interview with ID {interview_id} not found")
        return interview

    @staticmethod
    def delete_interview(interview_id):
        with atomic():
            interview = InterviewService.get_interview(interview_id)
            db.session.delete(interview)
        logger.info(f"🗑️ Interview {interview_id} deleted")

    @staticmethod
    def list_interviews_for_candidate(candidate_id):
        return databases.find_interviews_for_candidate(candidate_id)

    @staticmethod
    def list_all_interviews(take=50, skip=0, status=None, date_from=None, date_to=None):
        start, end = date_range(date_from, date_to)
        return databases.find_all_interviews(take=take, skip=skip, status=status, date_from=start, date_to=end)
