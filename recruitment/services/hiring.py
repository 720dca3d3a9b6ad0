# recruitment/services/hiring.py
import logging

from sqlalchemy.exc import IntegrityError

import recruitment.databases as databases
from recruitment.extensions import db
from recruitment import stages
from recruitment.errors import (
    AlreadyHiredError,
    CandidateNotFoundError,
    DepartmentNotFoundError,
    DuplicateEmployeeEmailError,
    InvalidStageError,
    InvalidTransitionError,
    JobInactiveError,
    JobNotFoundForCandidateError,
    ManagerNotFoundError,
    UseHireEndpointError,
)
from recruitment.unit_of_work import atomic
from recruitment.utils.dates import to_date

logger = logging.getLogger(__name__)

HIRED_FEEDBACK = "Converted to employee"


def check_requested_stage(next_stage):
    """Guards shared by every stage-changing entry point except the hire transaction."""
    if not stages.is_valid_stage(next_stage):
        raise InvalidStageError(f"Invalid stage: {next_stage}")
    if next_stage == stages.HIRED:
        raise UseHireEndpointError()


class HiringService:
    """
    Moves candidates through the pipeline and turns them into employees.
    """

    @staticmethod
    def update_candidate_stage(candidate_id, next_stage):
        """
        Guarded stage change.

        Checks run in a fixed order and the first failure wins: stage name,
        HIRED via the hire endpoint only, candidate existence, active job (a
        rejection is always allowed), then the transition table.
        """
        check_requested_stage(next_stage)

        with atomic():
            candidate = databases.get_candidate_by_id(candidate_id)
            if not candidate:
                raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")

            job = candidate.job_posting
            if not (job and job.is_active) and next_stage != stages.REJECTED:
                logger.warning(f"⚠️ Stage change blocked for {candidate_id}: job is inactive")
                raise JobInactiveError("Cannot progress candidate: job is inactive")

            current_stage = candidate.stage
            if not stages.can_transition(current_stage, next_stage):
                logger.warning(f"⚠️ Rejected transition {current_stage} -> {next_stage} for {candidate_id}")
                raise InvalidTransitionError(f"Invalid transition from {current_stage} to {next_stage}")

            candidate.stage = next_stage

        logger.info(f"✅ Candidate {candidate_id} moved {current_stage} -> {next_stage}")
        return candidate

    @staticmethod
    def update_candidate_status_with_reason(candidate_id, next_stage, reason=None):
        """
        Record a stage together with a free-text reason (rejection audit trail).

        The transition table is NOT consulted here; the reason overwrites the
        candidate's feedback, or clears it when empty. HIRED is still refused.
        """
        check_requested_stage(next_stage)

        with atomic():
            candidate = databases.get_candidate_by_id(candidate_id)
            if not candidate:
                raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")

            previous_stage = candidate.stage
            candidate.stage = next_stage
            candidate.feedback = reason or None

        logger.info(f"📝 Candidate {candidate_id} set {previous_stage} -> {next_stage} with reason")
        return candidate

    @staticmethod
    def hire_candidate(candidate_id, job_type, start_date, salary=None, manager_id=None):
        """
        Convert a candidate into an employee in one unit of work.

        Preconditions, each failing fast before any write:
        candidate exists, not already hired, linked to a job posting, the
        job's department exists, the manager exists (when given) and no
        employee already uses the candidate's email.

        Returns the new ``Employee``; the candidate ends up HIRED with the
        conversion note as feedback. Nothing is written if any step fails.
        """
        candidate_email = None
        try:
            with atomic():
                candidate = databases.get_candidate_by_id(candidate_id)
                if not candidate:
                    raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")

                if candidate.stage == stages.HIRED:
                    raise AlreadyHiredError()

                job = candidate.job_posting
                if not job:
                    raise JobNotFoundForCandidateError()

                department = databases.get_department_by_id(job.department_id)
                if not department:
                    raise DepartmentNotFoundError("Department not found for job posting")

                if manager_id:
                    manager = databases.get_employee_by_id(manager_id)
                    if not manager:
                        raise ManagerNotFoundError(f"Manager with ID {manager_id} not found")

                candidate_email = candidate.email
                existing = databases.get_employee_by_email(candidate.email)
                if existing:
                    raise DuplicateEmployeeEmailError(
                        f"Candidate email {candidate.email} already exists as an employee "
                        f"({existing.full_name})"
                    )

                employee = databases.create_employee(
                    first_name=candidate.first_name,
                    last_name=candidate.last_name,
                    email=candidate.email,
                    phone=candidate.phone or None,
                    job_type=job_type,
                    job_title=job.title,
                    department_id=department.id,
                    manager_id=manager_id or None,
                    salary=salary or None,
                    hire_date=to_date(start_date),
                )

                HiringService._mark_hired(candidate)
        except IntegrityError as e:
            # only a concurrent hire of the same email is a conflict; other violations propagate
            if not (candidate_email and databases.get_employee_by_email(candidate_email)):
                raise
            logger.warning(f"⚠️ Hire of {candidate_id} lost a race on employee email: {e.orig}")
            raise DuplicateEmployeeEmailError() from e

        logger.info(f"🎉 Candidate {candidate_id} hired as employee {employee.id} ({employee.job_title})")
        return employee

    @staticmethod
    def _mark_hired(candidate):
        candidate.stage = stages.HIRED
        candidate.feedback = HIRED_FEEDBACK
        db.session.flush()
