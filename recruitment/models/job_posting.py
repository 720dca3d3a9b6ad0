from recruitment.extensions import db
from datetime import datetime
import secrets
import uuid


def generate_public_token():
    """Opaque token that lets applicants open the posting without logging in."""
    return secrets.token_hex(32)


class JobPosting(db.Model):
    __tablename__ = "job_postings"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    department_id = db.Column(db.String(36), db.ForeignKey("departments.id"), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    public_token = db.Column(db.String(64), unique=True, default=generate_public_token)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    department = db.relationship("Department", back_populates="job_postings")
    skills = db.relationship("JobPostingSkill", back_populates="job_posting", cascade="all, delete-orphan")
    candidates = db.relationship(
        "Candidate",
        back_populates="job_posting",
        cascade="all, delete-orphan",
        order_by="Candidate.created_at.desc()",
    )


class JobPostingSkill(db.Model):
    __tablename__ = "job_posting_skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_posting_id = db.Column(db.String(36), db.ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False)
    skill_id = db.Column(db.String(36), db.ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    required = db.Column(db.Boolean, nullable=False, default=True)
    min_level = db.Column(db.Integer, nullable=False, default=1)  # 1 to 5

    job_posting = db.relationship("JobPosting", back_populates="skills")
    skill = db.relationship("Skill", back_populates="job_posting_skills")
