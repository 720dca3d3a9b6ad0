# recruitment/models/candidate.py
from recruitment.extensions import db
from recruitment.stages import VALID_STAGES, INITIAL_STAGE
from datetime import datetime
import uuid

class Candidate(db.Model):
    __tablename__ = "candidates"
    # one application per email and job posting, enforced by the database too
    __table_args__ = (
        db.UniqueConstraint("job_posting_id", "email", name="uq_candidates_job_posting_email"),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_posting_id = db.Column(db.String(36), db.ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50))
    resume_url = db.Column(db.String(500))

    stage = db.Column(db.Enum(*VALID_STAGES, name="candidate_stage", validate_strings=True), nullable=False, default=INITIAL_STAGE)
    score = db.Column(db.Integer)  # 0 to 100
    feedback = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    job_posting = db.relationship("JobPosting", back_populates="candidates")
    interviews = db.relationship("Interview", back_populates="candidate", cascade="all, delete-orphan")
    documents = db.relationship("CandidateDocument", back_populates="candidate", cascade="all, delete-orphan")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Candidate {self.email} [{self.stage}]>"
