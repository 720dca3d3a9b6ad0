"""
Data access for the recruitment module.

These functions only read from or stage changes on ``db.session``; they never
commit. Services decide the transaction boundary with ``unit_of_work.atomic``.
"""

from sqlalchemy import func

from recruitment.extensions import db
from recruitment.models import (
    Candidate,
    CandidateDocument,
    Contract,
    Department,
    Employee,
    Interview,
    JobPosting,
    JobPostingSkill,
    Skill,
    User,
)
from recruitment.models.job_posting import generate_public_token


# ==================== DEPARTMENTS / EMPLOYEES / SKILLS ====================

def get_department_by_id(department_id):
    if not department_id:
        return None
    return db.session.get(Department, department_id)


def get_employee_by_id(employee_id):
    if not employee_id:
        return None
    return db.session.get(Employee, employee_id)


def get_employee_by_email(email):
    return Employee.query.filter_by(email=email).first()


def create_employee(**fields):
    employee = Employee(**fields)
    db.session.add(employee)
    db.session.flush()
    return employee


def get_skills_by_ids(skill_ids):
    if not skill_ids:
        return []
    return Skill.query.filter(Skill.id.in_(skill_ids)).all()


# ==================== JOB POSTINGS ====================

def find_job_postings(q=None, is_active=None):
    query = JobPosting.query
    if q:
        query = query.filter(func.lower(JobPosting.title).like(f"%{q.lower()}%"))
    if isinstance(is_active, bool):
        query = query.filter(JobPosting.is_active == is_active)
    return query.order_by(JobPosting.created_at.desc()).all()


def get_job_posting_by_id(job_id):
    return db.session.get(JobPosting, job_id)


def get_job_posting_by_public_token(public_token):
    if not public_token:
        return None
    return JobPosting.query.filter_by(public_token=public_token).first()


def create_job_posting(title, description, department_id, is_active=True):
    job = JobPosting(
        title=title,
        description=description,
        department_id=department_id,
        is_active=is_active,
        public_token=generate_public_token(),
    )
    db.session.add(job)
    db.session.flush()
    return job


def replace_job_posting_skills(job, skills):
    """Swap the skill requirements of ``job``; delete-orphan removes the old rows."""
    job.skills = [
        JobPostingSkill(
            skill_id=s["skill_id"],
            required=bool(s.get("required", True)),
            min_level=int(s.get("min_level") or 1),
        )
        for s in skills
    ]
    db.session.flush()


def regenerate_public_token(job):
    job.public_token = generate_public_token()
    db.session.flush()
    return job


def delete_job_posting(job):
    # ORM cascade removes skills, candidates and, through them, interviews/documents
    db.session.delete(job)
    db.session.flush()


# ==================== CANDIDATES ====================

def get_candidate_by_id(candidate_id):
    return db.session.get(Candidate, candidate_id)


def find_candidate_by_email_for_job(job_posting_id, email):
    return Candidate.query.filter_by(job_posting_id=job_posting_id, email=email).first()


def find_candidates_for_job(job_id):
    return (
        Candidate.query.filter_by(job_posting_id=job_id)
        .order_by(Candidate.created_at.desc())
        .all()
    )


def find_all_candidates(take=50, skip=0, stage=None, date_from=None, date_to=None):
    query = Candidate.query
    if stage:
        query = query.filter(Candidate.stage == stage)
    if date_from:
        query = query.filter(Candidate.created_at >= date_from)
    if date_to:
        query = query.filter(Candidate.created_at <= date_to)
    return (
        query.order_by(Candidate.created_at.desc())
        .offset(int(skip))
        .limit(int(take))
        .all()
    )


def create_candidate(job_posting_id, first_name, last_name, email, phone=None, resume_url=None):
    candidate = Candidate(
        job_posting_id=job_posting_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        resume_url=resume_url,
    )
    db.session.add(candidate)
    db.session.flush()
    return candidate


def delete_candidate(candidate):
    # interviews and documents go with the candidate (delete-orphan cascade)
    db.session.delete(candidate)
    db.session.flush()


def count_job_postings(date_from=None, date_to=None):
    query = JobPosting.query
    if date_from:
        query = query.filter(JobPosting.created_at >= date_from)
    if date_to:
        query = query.filter(JobPosting.created_at <= date_to)
    return query.count()


def find_candidates_created_between(date_from=None, date_to=None):
    query = Candidate.query
    if date_from:
        query = query.filter(Candidate.created_at >= date_from)
    if date_to:
        query = query.filter(Candidate.created_at <= date_to)
    return query.all()


# ==================== INTERVIEWS ====================

def get_interview_by_id(interview_id):
    return db.session.get(Interview, interview_id)


def create_interview(**fields):
    interview = Interview(**fields)
    db.session.add(interview)
    db.session.flush()
    return interview


def find_interviews_for_candidate(candidate_id):
    return (
        Interview.query.filter_by(candidate_id=candidate_id)
        .order_by(Interview.date.desc())
        .all()
    )


def find_all_interviews(take=50, skip=0, status=None, date_from=None, date_to=None):
    query = Interview.query
    if status:
        query = query.filter(Interview.status == status)
    if date_from:
        query = query.filter(Interview.date >= date_from)
    if date_to:
        query = query.filter(Interview.date <= date_to)
    return (
        query.order_by(Interview.date.desc())
        .offset(int(skip))
        .limit(int(take))
        .all()
    )


# ==================== DOCUMENTS / CONTRACTS ====================

def find_candidate_documents(candidate_id):
    return (
        CandidateDocument.query.filter_by(candidate_id=candidate_id)
        .order_by(CandidateDocument.uploaded_at.desc())
        .all()
    )


def get_candidate_document_by_id(document_id):
    return db.session.get(CandidateDocument, document_id)


def create_candidate_document(candidate_id, name, file_url=None, document_type=None):
    document = CandidateDocument(
        candidate_id=candidate_id,
        name=name,
        file_url=file_url,
        document_type=document_type or "OTHER",
    )
    db.session.add(document)
    db.session.flush()
    return document


def create_contract(employee_id, start_date, end_date=None, document=None):
    contract = Contract(
        employee_id=employee_id,
        start_date=start_date,
        end_date=end_date,
        document=document,
    )
    db.session.add(contract)
    db.session.flush()
    return contract


# ==================== USERS ====================

def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


# ==================== HELPER FUNCTIONS ====================

def _iso(value):
    return value.isoformat() if value else None


def _number(value):
    return float(value) if value is not None else None


def department_to_dict(d: Department):
    if d is None:
        return None
    return {
        "id": d.id,
        "name": d.name,
        "description": d.description,
    }


def employee_to_dict(e: Employee):
    return {
        "id": e.id,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "email": e.email,
        "phone": e.phone,
        "jobTitle": e.job_title,
        "jobType": e.job_type,
        "departmentId": e.department_id,
        "managerId": e.manager_id,
        "salary": _number(e.salary),
        "hireDate": _iso(e.hire_date),
        "createdAt": _iso(e.created_at),
    }


def job_posting_skill_to_dict(s: JobPostingSkill):
    return {
        "skillId": s.skill_id,
        "name": s.skill.name if s.skill else None,
        "required": s.required,
        "minLevel": s.min_level,
    }


def job_posting_to_dict(job: JobPosting, include_candidates=False):
    data = {
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "departmentId": job.department_id,
        "department": department_to_dict(job.department),
        "isActive": job.is_active,
        "publicToken": job.public_token,
        "skills": [job_posting_skill_to_dict(s) for s in job.skills],
        "candidateCount": len(job.candidates),
        "createdAt": _iso(job.created_at),
    }
    if include_candidates:
        data["candidates"] = [candidate_to_dict(c) for c in job.candidates]
    return data


def public_job_posting_to_dict(job: JobPosting):
    """What an applicant may see: no candidates, no token."""
    return {
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "department": job.department.name if job.department else None,
        "isActive": job.is_active,
        "skills": [job_posting_skill_to_dict(s) for s in job.skills],
    }


def candidate_to_dict(c: Candidate, include_job=False):
    data = {
        "id": c.id,
        "jobPostingId": c.job_posting_id,
        "firstName": c.first_name,
        "lastName": c.last_name,
        "email": c.email,
        "phone": c.phone,
        "resumeUrl": c.resume_url,
        "stage": c.stage,
        "score": c.score,
        "feedback": c.feedback,
        "createdAt": _iso(c.created_at),
    }
    if include_job and c.job_posting is not None:
        data["jobPosting"] = {
            "id": c.job_posting.id,
            "title": c.job_posting.title,
            "department": department_to_dict(c.job_posting.department),
        }
    return data


def interview_to_dict(i: Interview):
    data = {
        "id": i.id,
        "candidateId": i.candidate_id,
        "interviewerId": i.interviewer_id,
        "date": _iso(i.date),
        "duration": i.duration,
        "type": i.type,
        "location": i.location,
        "meetingLink": i.meeting_link,
        "notes": i.notes,
        "feedback": i.feedback,
        "rating": i.rating,
        "status": i.status,
    }
    if i.candidate is not None:
        data["candidate"] = {
            "id": i.candidate.id,
            "firstName": i.candidate.first_name,
            "lastName": i.candidate.last_name,
            "email": i.candidate.email,
        }
    if i.interviewer is not None:
        data["interviewer"] = {
            "id": i.interviewer.id,
            "firstName": i.interviewer.first_name,
            "lastName": i.interviewer.last_name,
            "email": i.interviewer.email,
            "jobTitle": i.interviewer.job_title,
        }
    return data


def candidate_document_to_dict(d: CandidateDocument):
    return {
        "id": d.id,
        "candidateId": d.candidate_id,
        "name": d.name,
        "fileUrl": d.file_url,
        "documentType": d.document_type,
        "uploadedAt": _iso(d.uploaded_at),
    }


def contract_to_dict(c: Contract):
    return {
        "id": c.id,
        "employeeId": c.employee_id,
        "startDate": _iso(c.start_date),
        "endDate": _iso(c.end_date),
        "document": c.document,
        "createdAt": _iso(c.created_at),
    }

