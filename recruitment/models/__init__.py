from .user import User
from .department import Department
from .employee import Employee
from .skill import Skill
from .job_posting import JobPosting, JobPostingSkill
from .candidate import Candidate
from .interview import Interview
from .candidate_document import CandidateDocument
from .contract import Contract

__all__ = [
    "User",
    "Department",
    "Employee",
    "Skill",
    "JobPosting",
    "JobPostingSkill",
    "Candidate",
    "Interview",
    "CandidateDocument",
    "Contract",
]
