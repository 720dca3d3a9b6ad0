from .auth import AuthService
from .documents import DocumentService
from .hiring import HiringService
from .interviews import InterviewService
from .offers import OfferService
from .recruitment import RecruitmentService

__all__ = [
    "AuthService",
    "DocumentService",
    "HiringService",
    "InterviewService",
    "OfferService",
    "RecruitmentService",
]
