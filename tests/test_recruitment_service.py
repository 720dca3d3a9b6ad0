"""
Job posting and candidate application tests at the service layer.
"""
import io
import os

import pytest
from werkzeug.datastructures import FileStorage

import recruitment.databases as databases
from recruitment.errors import (
    CandidateNotFoundError,
    DepartmentNotFoundError,
    DuplicateApplicationError,
    InvalidUploadError,
    JobInactiveError,
    JobNotFoundError,
    SkillNotFoundError,
)
from recruitment.models import Candidate, Interview, JobPosting, JobPostingSkill
from recruitment.services import InterviewService, RecruitmentService
from tests.conftest import fresh

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def application(**overrides):
    data = {
        "first_name": "Rina",
        "last_name": "Wijaya",
        "email": "rina.wijaya@mail-candidates.io",
        "phone": None,
        "resume_url": None,
    }
    data.update(overrides)
    return data


def pdf_upload(filename="resume.pdf"):
    return FileStorage(stream=io.BytesIO(b"%PDF-1.4 resume"), filename=filename, content_type="application/pdf")


@pytest.fixture
def upload_dir(app, tmp_path):
    app.config["UPLOAD_FOLDER"] = str(tmp_path)
    return tmp_path


# ============================================================================
# JOB POSTINGS
# ============================================================================

class TestJobPostings:

    def test_create_with_skills(self, department_factory, skill_factory):
        department = department_factory(name="Engineering")
        python = skill_factory("Python")
        sql = skill_factory("SQL")

        job = RecruitmentService.create_job_posting(
            "Backend Engineer",
            "Own the recruitment API and its data model.",
            department.id,
            skills=[
                {"skill_id": python.id, "required": True, "min_level": 4},
                {"skill_id": sql.id, "required": False, "min_level": 2},
            ],
        )

        assert job.is_active is True
        assert len(job.public_token) == 64
        levels = {s.skill_id: (s.required, s.min_level) for s in job.skills}
        assert levels == {python.id: (True, 4), sql.id: (False, 2)}

    def test_create_requires_existing_department(self, app):
        with pytest.raises(DepartmentNotFoundError):
            RecruitmentService.create_job_posting("Designer", "Design the careers portal.", MISSING_ID)

        assert JobPosting.query.count() == 0

    def test_create_requires_existing_skills(self, department_factory):
        department = department_factory()

        with pytest.raises(SkillNotFoundError):
            RecruitmentService.create_job_posting(
                "Designer",
                "Design the careers portal.",
                department.id,
                skills=[{"skill_id": MISSING_ID}],
            )

        assert JobPosting.query.count() == 0

    def test_update_replaces_skills(self, job_factory, skill_factory):
        job = job_factory()
        old, new = skill_factory(), skill_factory()
        databases.replace_job_posting_skills(job, [{"skill_id": old.id}])

        RecruitmentService.update_job_posting(job.id, title="Staff Engineer", skills=[{"skill_id": new.id, "min_level": 5}])

        reloaded = fresh(JobPosting, job.id)
        assert reloaded.title == "Staff Engineer"
        assert [(s.skill_id, s.min_level) for s in reloaded.skills] == [(new.id, 5)]
        assert JobPostingSkill.query.count() == 1

    def test_update_with_empty_skills_clears_them(self, job_factory, skill_factory):
        job = job_factory()
        databases.replace_job_posting_skills(job, [{"skill_id": skill_factory().id}])

        RecruitmentService.update_job_posting(job.id, skills=[])

        assert JobPostingSkill.query.count() == 0

    def test_update_without_skills_keeps_them(self, job_factory, skill_factory):
        job = job_factory()
        databases.replace_job_posting_skills(job, [{"skill_id": skill_factory().id}])

        RecruitmentService.update_job_posting(job.id, is_active=False)

        assert JobPostingSkill.query.count() == 1
        assert fresh(JobPosting, job.id).is_active is False

    def test_update_missing_job(self, app):
        with pytest.raises(JobNotFoundError):
            RecruitmentService.update_job_posting(MISSING_ID, title="Nobody")

    def test_generate_public_token_rotates_it(self, job_factory):
        job = job_factory()
        before = job.public_token

        RecruitmentService.generate_public_token(job.id)

        assert fresh(JobPosting, job.id).public_token != before
        assert databases.get_job_posting_by_public_token(before) is None

    def test_archive(self, job_factory):
        job = job_factory()

        RecruitmentService.archive_job_posting(job.id)

        assert fresh(JobPosting, job.id).is_active is False

    def test_list_filters(self, job_factory):
        job_factory(title="Frontend Engineer")
        job_factory(title="Backend Engineer", is_active=False)
        job_factory(title="Recruiter")

        titles = {j.title for j in RecruitmentService.list_job_postings(q="engineer")}
        active = {j.title for j in RecruitmentService.list_job_postings(q="engineer", is_active=True)}

        assert titles == {"Frontend Engineer", "Backend Engineer"}
        assert active == {"Frontend Engineer"}

    def test_delete_removes_candidates_and_their_interviews(self, job_factory, candidate_factory):
        job = job_factory()
        candidate = candidate_factory(job_posting_id=job.id)
        InterviewService.schedule_interview(candidate.id, "2026-11-05T09:00:00")

        RecruitmentService.delete_job_posting(job.id)

        assert JobPosting.query.count() == 0
        assert Candidate.query.count() == 0
        assert Interview.query.count() == 0


# ============================================================================
# APPLICATIONS
# ============================================================================

class TestStaffApplications:

    def test_creates_applied_candidate(self, job_factory):
        job = job_factory()

        candidate = RecruitmentService.create_candidate_for_job(job.id, application(phone="  ", resume_url=""))

        assert candidate.stage == "APPLIED"
        assert candidate.job_posting_id == job.id
        assert candidate.phone is None
        assert candidate.resume_url is None

    def test_missing_job(self, app):
        with pytest.raises(JobNotFoundError):
            RecruitmentService.create_candidate_for_job(MISSING_ID, application())

    def test_inactive_job(self, job_factory):
        job = job_factory(is_active=False)

        with pytest.raises(JobInactiveError):
            RecruitmentService.create_candidate_for_job(job.id, application())

        assert Candidate.query.count() == 0

    def test_duplicate_email_for_same_job(self, job_factory):
        job = job_factory()
        RecruitmentService.create_candidate_for_job(job.id, application())

        with pytest.raises(DuplicateApplicationError) as exc:
            RecruitmentService.create_candidate_for_job(job.id, application(first_name="Other"))

        assert exc.value.status_code == 409
        assert exc.value.code == "CANDIDATE_DUPLICATE"
        assert "rina.wijaya@mail-candidates.io" in exc.value.message
        assert Candidate.query.count() == 1

    def test_same_email_may_apply_to_another_job(self, job_factory):
        first, second = job_factory(), job_factory()
        RecruitmentService.create_candidate_for_job(first.id, application())

        RecruitmentService.create_candidate_for_job(second.id, application())

        assert Candidate.query.count() == 2

    def test_concurrent_duplicate_hits_unique_constraint(self, monkeypatch, job_factory):
        job = job_factory()
        RecruitmentService.create_candidate_for_job(job.id, application())
        monkeypatch.setattr(databases, "find_candidate_by_email_for_job", lambda job_id, email: None)

        with pytest.raises(DuplicateApplicationError):
            RecruitmentService.create_candidate_for_job(job.id, application())

        assert Candidate.query.count() == 1


class TestPublicApplications:

    def test_apply_through_public_token(self, job_factory):
        job = job_factory()

        candidate = RecruitmentService.create_public_application(job.public_token, application())

        assert candidate.job_posting_id == job.id
        assert candidate.stage == "APPLIED"

    def test_unknown_token(self, app):
        with pytest.raises(JobNotFoundError) as exc:
            RecruitmentService.create_public_application("not-a-token", application())
        assert exc.value.message == "Job posting not found"

    def test_closed_posting(self, job_factory):
        job = job_factory(is_active=False)

        with pytest.raises(JobInactiveError) as exc:
            RecruitmentService.create_public_application(job.public_token, application())

        assert exc.value.message == "This job posting is no longer accepting applications"

    def test_duplicate_is_worded_for_the_applicant(self, job_factory):
        job = job_factory()
        RecruitmentService.create_public_application(job.public_token, application())

        with pytest.raises(DuplicateApplicationError) as exc:
            RecruitmentService.create_public_application(job.public_token, application())

        assert exc.value.message == "You have already applied to this position"

    def test_resume_is_stored(self, job_factory, upload_dir):
        job = job_factory()

        candidate = RecruitmentService.create_public_application(
            job.public_token, application(), resume_file=pdf_upload()
        )

        assert candidate.resume_url.startswith("/uploads/")
        assert candidate.resume_url.endswith(".pdf")
        assert os.listdir(upload_dir) == [candidate.resume_url.rsplit("/", 1)[1]]

    def test_resume_with_bad_extension(self, job_factory, upload_dir):
        job = job_factory()

        with pytest.raises(InvalidUploadError):
            RecruitmentService.create_public_application(
                job.public_token, application(), resume_file=pdf_upload("resume.exe")
            )

        assert Candidate.query.count() == 0
        assert os.listdir(upload_dir) == []

    def test_resume_removed_when_concurrent_duplicate_wins(self, monkeypatch, job_factory, upload_dir):
        job = job_factory()
        RecruitmentService.create_public_application(job.public_token, application())
        monkeypatch.setattr(databases, "find_candidate_by_email_for_job", lambda job_id, email: None)

        with pytest.raises(DuplicateApplicationError):
            RecruitmentService.create_public_application(
                job.public_token, application(), resume_file=pdf_upload()
            )

        assert Candidate.query.count() == 1
        assert os.listdir(upload_dir) == []

    def test_resume_not_stored_for_duplicate(self, job_factory, upload_dir):
        job = job_factory()
        RecruitmentService.create_public_application(job.public_token, application())

        with pytest.raises(DuplicateApplicationError):
            RecruitmentService.create_public_application(
                job.public_token, application(), resume_file=pdf_upload()
            )

        assert os.listdir(upload_dir) == []


# ============================================================================
# CANDIDATE QUERIES / SCORING / KPIs
# ============================================================================

class TestCandidates:

    def test_list_for_missing_job(self, app):
        with pytest.raises(JobNotFoundError):
            RecruitmentService.list_candidates_for_job(MISSING_ID)

    def test_list_all_filters_by_stage(self, candidate_factory):
        candidate_factory(stage="APPLIED")
        screening = candidate_factory(stage="SCREENING")

        result = RecruitmentService.list_all_candidates(stage="SCREENING")

        assert [c.id for c in result] == [screening.id]

    def test_list_all_paginates(self, candidate_factory):
        for _ in range(3):
            candidate_factory()

        assert len(RecruitmentService.list_all_candidates(take=2)) == 2
        assert len(RecruitmentService.list_all_candidates(take=2, skip=2)) == 1

    def test_list_all_filters_by_date(self, candidate_factory):
        candidate_factory()

        assert len(RecruitmentService.list_all_candidates(date_from="2000-01-01")) == 1
        assert RecruitmentService.list_all_candidates(date_to="2000-01-01") == []

    def test_get_missing_candidate(self, app):
        with pytest.raises(CandidateNotFoundError):
            RecruitmentService.get_candidate(MISSING_ID)

    def test_delete_candidate_removes_interviews(self, candidate_factory):
        candidate = candidate_factory()
        InterviewService.schedule_interview(candidate.id, "2026-11-05T09:00:00")

        result = RecruitmentService.delete_candidate(candidate.id)

        assert result["success"] is True
        assert Candidate.query.count() == 0
        assert Interview.query.count() == 0

    def test_shortlist_by_min_score(self, job_factory, candidate_factory):
        job = job_factory()
        strong = candidate_factory(job_posting_id=job.id, score=85)
        candidate_factory(job_posting_id=job.id, score=40)
        candidate_factory(job_posting_id=job.id)

        result = RecruitmentService.shortlist_candidates(job.id, min_score=70)

        assert result["total"] == 3
        assert result["shortlisted"] == 1
        assert [c.id for c in result["candidates"]] == [strong.id]

    def test_set_score(self, candidate_factory):
        candidate = candidate_factory()

        RecruitmentService.set_candidate_score(candidate.id, 72)

        assert fresh(Candidate, candidate.id).score == 72

    def test_kpis_count_jobs_candidates_and_hires(self, job_factory, candidate_factory):
        job = job_factory()
        candidate_factory(job_posting_id=job.id)
        candidate_factory(job_posting_id=job.id, stage="HIRED")

        kpis = RecruitmentService.get_recruitment_kpis()

        assert kpis["totals"] == {"jobs": 1, "candidates": 2, "hired": 1}
        assert kpis["metrics"] == {"timeToHire": 0, "costPerHire": 0, "sourceEffectiveness": []}
