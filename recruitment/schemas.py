# recruitment/schemas.py
"""Request bodies accepted by the recruitment API (camelCase on the wire)."""
from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

JobType = Literal["FULL_TIME", "PART_TIME", "CONTRACT", "INTERN"]
InterviewType = Literal["IN_PERSON", "VIDEO", "PHONE"]
InterviewStatus = Literal["SCHEDULED", "COMPLETED", "CANCELLED", "RESCHEDULED"]
DocumentType = Literal["RESUME", "COVER_LETTER", "PORTFOLIO", "CERTIFICATE", "OTHER"]
Role = Literal["admin", "hr", "manager", "employee"]


class RequestModel(BaseModel):
    # Accept both the camelCase aliases sent by the React client and field names
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class PartialUpdateModel(RequestModel):
    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


# ==================== JOB POSTINGS ====================

class SkillRequirement(RequestModel):
    skill_id: str = Field(alias="skillId")
    required: bool = True
    min_level: int = Field(default=1, ge=1, le=5, alias="minLevel")


class JobPostingCreate(RequestModel):
    title: str = Field(min_length=3)
    description: str = Field(min_length=10)
    department_id: str = Field(alias="departmentId")
    is_active: bool = Field(default=True, alias="isActive")
    skills: List[SkillRequirement] = Field(default_factory=list)


class JobPostingUpdate(PartialUpdateModel):
    title: Optional[str] = Field(default=None, min_length=3)
    description: Optional[str] = Field(default=None, min_length=10)
    department_id: Optional[str] = Field(default=None, alias="departmentId")
    is_active: Optional[bool] = Field(default=None, alias="isActive")
    skills: Optional[List[SkillRequirement]] = None


# ==================== CANDIDATES ====================

class CandidateCreate(RequestModel):
    first_name: str = Field(min_length=2, alias="firstName")
    last_name: str = Field(min_length=2, alias="lastName")
    email: EmailStr
    phone: Optional[str] = None
    resume_url: Optional[str] = Field(default=None, alias="resumeUrl")


class StageUpdate(RequestModel):
    # Stage names are checked by the stage guard so it can answer INVALID_STAGE
    stage: str


class StatusWithReason(RequestModel):
    stage: str
    reason: Optional[str] = None


class HireRequest(RequestModel):
    job_type: JobType = Field(alias="jobType")
    salary: Optional[float] = Field(default=None, gt=0)
    manager_id: Optional[str] = Field(default=None, alias="managerId")
    start_date: date = Field(alias="startDate")


class ScoreUpdate(RequestModel):
    score: int = Field(ge=0, le=100)


class ShortlistCriteria(RequestModel):
    min_score: int = Field(default=0, ge=0, le=100, alias="minScore")


class ShortlistRequest(RequestModel):
    criteria: ShortlistCriteria = Field(default_factory=ShortlistCriteria)


class NotifyRequest(RequestModel):
    subject: str = Field(min_length=3)
    message: str = Field(min_length=1)
    channel: Literal["email", "sms"] = "email"


# ==================== INTERVIEWS ====================

class InterviewCreate(RequestModel):
    candidate_id: str = Field(alias="candidateId")
    interviewer_id: Optional[str] = Field(default=None, alias="interviewerId")
    date: datetime
    duration: Optional[int] = Field(default=None, ge=15, le=480)  # 15 minutes to 8 hours
    type: Optional[InterviewType] = None
    location: Optional[str] = None
    meeting_link: Optional[str] = Field(default=None, alias="meetingLink")
    notes: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=10)


class InterviewUpdate(PartialUpdateModel):
    date: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, ge=15, le=480)
    type: Optional[InterviewType] = None
    location: Optional[str] = None
    meeting_link: Optional[str] = Field(default=None, alias="meetingLink")
    notes: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=10)
    status: Optional[InterviewStatus] = None

    @field_validator("type", "status")
    @classmethod
    def not_null(cls, value, info):
        # may be omitted, but the columns cannot be cleared
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


# ==================== OFFERS / CONTRACTS / ONBOARDING ====================

class OfferRequest(RequestModel):
    salary: float = Field(gt=0)
    start_date: date = Field(alias="startDate")
    position: Optional[str] = None
    template: str = "standard"


class ContractRequest(RequestModel):
    employee_id: str = Field(alias="employeeId")
    start_date: date = Field(alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    document: Optional[str] = None


class OnboardingTask(RequestModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")


class OnboardingRequest(RequestModel):
    tasks: List[OnboardingTask] = Field(default_factory=list)


# ==================== DOCUMENTS ====================

class DocumentCreate(RequestModel):
    name: str = Field(min_length=1)
    file_url: Optional[str] = Field(default=None, alias="fileUrl")
    document_type: Optional[DocumentType] = Field(default=None, alias="documentType")


class DocumentUpdate(PartialUpdateModel):
    name: Optional[str] = Field(default=None, min_length=1)
    document_type: Optional[DocumentType] = Field(default=None, alias="documentType")


# ==================== AUTH ====================

class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(RequestModel):
    name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=8)
    role: Role = "hr"
