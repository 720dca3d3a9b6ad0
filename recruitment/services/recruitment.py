# recruitment/services/recruitment.py
import logging

from sqlalchemy.exc import IntegrityError

import recruitment.databases as databases
from recruitment import stages
from recruitment.errors import (
    CandidateNotFoundError,
    DepartmentNotFoundError,
    DuplicateApplicationError,
    JobInactiveError,
    JobNotFoundError,
    SkillNotFoundError,
)
from recruitment.services.documents import delete_upload, save_upload
from recruitment.unit_of_work import atomic
from recruitment.utils.dates import date_range

logger = logging.getLogger(__name__)


def _blank_to_none(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _check_skills_exist(skills):
    skill_ids = {s["skill_id"] for s in skills}
    found = {s.id for s in databases.get_skills_by_ids(list(skill_ids))}
    missing = skill_ids - found
    if missing:
        raise SkillNotFoundError(f"Skill(s) not found: {', '.join(sorted(missing))}")


class RecruitmentService:
    """Job postings and the candidates applying to them."""

    # ==================== JOB POSTINGS ====================

    @staticmethod
    def list_job_postings(q=None, is_active=None):
        return databases.find_job_postings(q=q, is_active=is_active)

    @staticmethod
    def get_job_posting(job_id):
        job = databases.get_job_posting_by_id(job_id)
        if not job:
            raise JobNotFoundError(f"Job posting with ID {job_id} not found")
        return job

    @staticmethod
    def get_job_posting_by_public_token(public_token):
        job = databases.get_job_posting_by_public_token(public_token)
        if not job:
            raise JobNotFoundError("Job posting not found")
        return job

    @staticmethod
    def create_job_posting(title, description, department_id, is_active=True, skills=None):
        """Create a posting and its skill requirements; the department must exist."""
        skills = skills or []
        with atomic():
            if not databases.get_department_by_id(department_id):
                raise DepartmentNotFoundError(f"Department with ID {department_id} does not exist")
            _check_skills_exist(skills)

            job = databases.create_job_posting(title, description, department_id, is_active=is_active)
            if skills:
                databases.replace_job_posting_skills(job, skills)

        logger.info(f"📌 Job posting '{job.title}' created ({job.id})")
        return job

    @staticmethod
    def update_job_posting(job_id, **changes):
        """
        Partial update. When ``skills`` is present (even empty) it replaces the
        whole skill set; fields and skills are written in one transaction.
        """
        skills = changes.pop("skills", None)
        with atomic():
            job = RecruitmentService.get_job_posting(job_id)

            department_id = changes.get("department_id")
            if department_id and not databases.get_department_by_id(department_id):
                raise DepartmentNotFoundError(f"Department with ID {department_id} does not exist")

            for field in ("title", "description", "department_id", "is_active"):
                if changes.get(field) is not None:
                    setattr(job, field, changes[field])

            if skills is not None:
                _check_skills_exist(skills)
                databases.replace_job_posting_skills(job, skills)

        logger.info(f"✏️ Job posting {job_id} updated")
        return job

    @staticmethod
    def generate_public_token(job_id):
        with atomic():
            job = RecruitmentService.get_job_posting(job_id)
            databases.regenerate_public_token(job)
        logger.info(f"🔗 Public link regenerated for job {job_id}")
        return job

    @staticmethod
    def archive_job_posting(job_id):
        with atomic():
            job = RecruitmentService.get_job_posting(job_id)
            job.is_active = False
        logger.info(f"🗄️ Job posting {job_id} archived")
        return job

    @staticmethod
    def delete_job_posting(job_id):
        with atomic():
            job = RecruitmentService.get_job_posting(job_id)
            databases.delete_job_posting(job)
        logger.info(f"🗑️ Job posting {job_id} deleted with its candidates")

    # ==================== CANDIDATES ====================

    @staticmethod
    def list_candidates_for_job(job_id):
        RecruitmentService.get_job_posting(job_id)
        return databases.find_candidates_for_job(job_id)

    @staticmethod
    def list_all_candidates(take=50, skip=0, stage=None, date_from=None, date_to=None):
        start, end = date_range(date_from, date_to)
        return databases.find_all_candidates(take=take, skip=skip, stage=stage, date_from=start, date_to=end)

    @staticmethod
    def get_candidate(candidate_id):
        candidate = databases.get_candidate_by_id(candidate_id)
        if not candidate:
            raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")
        return candidate

    @staticmethod
    def create_candidate_for_job(job_id, data):
        """
        Staff-side application: the job must exist and be active and the email
        must not have applied to it already. Blank phone/resume become NULL.
        """
        job = databases.get_job_posting_by_id(job_id)
        if not job:
            raise JobNotFoundError(f"Job posting with ID {job_id} not found")
        if not job.is_active:
            raise JobInactiveError(f"Job posting {job_id} is not active")

        return RecruitmentService._create_application(
            job,
            data,
            duplicate_message=f"A candidate with email {data['email']} has already applied to this job posting",
        )

    @staticmethod
    def create_public_application(public_token, data, resume_file=None):
        """
        Same guards as the staff path, worded for the applicant. An attached
        resume is stored only once every guard has passed.
        """
        job = databases.get_job_posting_by_public_token(public_token)
        if not job:
            raise JobNotFoundError("Job posting not found")
        if not job.is_active:
            raise JobInactiveError("This job posting is no longer accepting applications")

        return RecruitmentService._create_application(
            job,
            data,
            duplicate_message="You have already applied to this position",
            resume_file=resume_file,
        )

    @staticmethod
    def _create_application(job, data, duplicate_message, resume_file=None):
        if databases.find_candidate_by_email_for_job(job.id, data["email"]):
            logger.warning(f"⚠️ Duplicate application for job {job.id}: {data['email']}")
            raise DuplicateApplicationError(duplicate_message)

        resume_url = data.get("resume_url")
        stored_upload = None
        if resume_file is not None and resume_file.filename:
            resume_url = stored_upload = save_upload(resume_file)

        try:
            with atomic():
                candidate = databases.create_candidate(
                    job.id,
                    first_name=data["first_name"],
                    last_name=data["last_name"],
                    email=data["email"],
                    phone=_blank_to_none(data.get("phone")),
                    resume_url=_blank_to_none(resume_url),
                )
        except IntegrityError as e:
            # unique (job_posting_id, email) caught a concurrent application
            if stored_upload:
                delete_upload(stored_upload)
            raise DuplicateApplicationError(duplicate_message) from e

        logger.info(f"🧾 New application from {candidate.email} for job {job.id}")
        return candidate

    @staticmethod
    def delete_candidate(candidate_id):
        with atomic():
            candidate = RecruitmentService.get_candidate(candidate_id)
            databases.delete_candidate(candidate)
        logger.info(f"🗑️ Candidate {candidate_id} deleted")
        return {"success": True, "message": "Candidate deleted successfully"}

    # ==================== SCORING ====================

    @staticmethod
    def set_candidate_score(candidate_id, score):
        with atomic():
            candidate = RecruitmentService.get_candidate(candidate_id)
            candidate.score = score
        return candidate

    @staticmethod
    def shortlist_candidates(job_id, min_score=0):
        """Candidates of ``job_id`` scoring at least ``min_score`` (unscored counts as 0)."""
        candidates = RecruitmentService.list_candidates_for_job(job_id)
        shortlisted = [c for c in candidates if (c.score or 0) >= min_score]
        return {
            "total": len(candidates),
            "shortlisted": len(shortlisted),
            "candidates": shortlisted,
        }

    # ==================== KPIs ====================

    @staticmethod
    def get_recruitment_kpis(date_from=None, date_to=None):
        # Only totals are real; the metrics need applied->hired timestamps,
        # spend tracking and a source field that the data model lacks.
        start, end = date_range(date_from, date_to)
        candidates = databases.find_candidates_created_between(start, end)
        hired = [c for c in candidates if c.stage == stages.HIRED]
        return {
            "totals": {
                "jobs": databases.count_job_postings(start, end),
                "candidates": len(candidates),
                "hired": len(hired),
            },
            "metrics": {
                "timeToHire": 0,
                "costPerHire": 0,
                "sourceEffectiveness": [],
            },
        }
