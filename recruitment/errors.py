# recruitment/errors.py
"""
Domain errors raised by the services.

Every error carries its HTTP status and a stable machine code as class
attributes, so the error handler in ``create_app`` can translate any of them
into ``{"success": false, "message": ..., "code": ...}`` without inspecting
the message.
"""


class RecruitmentError(Exception):
    status_code = 500
    code = "RECRUITMENT_ERROR"
    default_message = "Recruitment operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ==================== TAXONOMY ====================

class NotFoundError(RecruitmentError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(RecruitmentError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource already exists"


class InvalidInputError(RecruitmentError):
    status_code = 400
    code = "INVALID_INPUT"
    default_message = "Invalid input"


class InvalidStateTransitionError(RecruitmentError):
    status_code = 400
    code = "INVALID_STAGE_TRANSITION"
    default_message = "Invalid stage transition"


class InactiveResourceError(RecruitmentError):
    status_code = 400
    code = "INACTIVE_RESOURCE"
    default_message = "Resource is not active"


# ==================== NOT FOUND ====================

class CandidateNotFoundError(NotFoundError):
    code = "CANDIDATE_NOT_FOUND"
    default_message = "Candidate not found"


class JobNotFoundError(NotFoundError):
    code = "JOB_NOT_FOUND"
    default_message = "Job posting not found"


class JobNotFoundForCandidateError(NotFoundError):
    code = "JOB_NOT_FOUND_FOR_CANDIDATE"
    default_message = "Candidate is not linked to a job posting"


class DepartmentNotFoundError(NotFoundError):
    code = "DEPARTMENT_NOT_FOUND"
    default_message = "Department not found"


class ManagerNotFoundError(NotFoundError):
    code = "MANAGER_NOT_FOUND"
    default_message = "Manager not found"


class EmployeeNotFoundError(NotFoundError):
    code = "EMPLOYEE_NOT_FOUND"
    default_message = "Employee not found"


class InterviewerNotFoundError(NotFoundError):
    code = "INTERVIEWER_NOT_FOUND"
    default_message = "Interviewer not found"


class InterviewNotFoundError(NotFoundError):
    code = "INTERVIEW_NOT_FOUND"
    default_message = "Interview not found"


class DocumentNotFoundError(NotFoundError):
    code = "DOCUMENT_NOT_FOUND"
    default_message = "Document not found"


class SkillNotFoundError(NotFoundError):
    code = "SKILL_NOT_FOUND"
    default_message = "Skill not found"


# ==================== CONFLICT ====================

class DuplicateApplicationError(ConflictError):
    code = "CANDIDATE_DUPLICATE"
    default_message = "A candidate with this email has already applied to this job posting"


# The hire endpoint answers its conflicts with 400, not 409.
class AlreadyHiredError(ConflictError):
    status_code = 400
    code = "CANDIDATE_ALREADY_HIRED"
    default_message = "Candidate already hired"


class DuplicateEmployeeEmailError(ConflictError):
    status_code = 400
    code = "EMAIL_ALREADY_EXISTS"
    default_message = "Candidate email already exists as an employee"


class EmailAlreadyRegisteredError(ConflictError):
    code = "EMAIL_ALREADY_REGISTERED"
    default_message = "Email already registered"


# ==================== INVALID INPUT ====================

class InvalidStageError(InvalidInputError):
    code = "INVALID_STAGE"
    default_message = "Invalid stage"


class UseHireEndpointError(InvalidInputError):
    code = "USE_HIRE_ENDPOINT"
    default_message = (
        "Cannot mark candidate as HIRED through stage update. "
        "Please use the hire candidate endpoint to create an employee record."
    )


class InvalidUploadError(InvalidInputError):
    code = "INVALID_UPLOAD"
    default_message = "Only PDF, DOC, DOCX, JPG, PNG, and GIF files are allowed"


class InvalidDateError(InvalidInputError):
    code = "INVALID_DATE"
    default_message = "Invalid date"


# ==================== STATE ====================

class InvalidTransitionError(InvalidStateTransitionError):
    code = "INVALID_STAGE_TRANSITION"


class JobInactiveError(InactiveResourceError):
    code = "JOB_INACTIVE"
    default_message = "Job posting is not active"


# ==================== AUTH ====================

class AuthenticationError(RecruitmentError):
    status_code = 401
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"


class PermissionDeniedError(RecruitmentError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "You do not have permission to perform this action"
