from recruitment.extensions import db
import uuid

INTERVIEW_TYPES = ("IN_PERSON", "VIDEO", "PHONE")
INTERVIEW_STATUSES = ("SCHEDULED", "COMPLETED", "CANCELLED", "RESCHEDULED")

class Interview(db.Model):
    __tablename__ = "interviews"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    interviewer_id = db.Column(db.String(36), db.ForeignKey("employees.id", ondelete="SET NULL"))
    date = db.Column(db.DateTime, nullable=False)
    duration = db.Column(db.Integer)  # minutes
    type = db.Column(db.Enum(*INTERVIEW_TYPES, name="interview_type"), nullable=False, default="VIDEO")
    location = db.Column(db.String(255))
    meeting_link = db.Column(db.String(500))
    notes = db.Column(db.Text)
    feedback = db.Column(db.Text)
    rating = db.Column(db.Integer)  # 1 to 10
    status = db.Column(db.Enum(*INTERVIEW_STATUSES, name="interview_status"), nullable=False, default="SCHEDULED")

    candidate = db.relationship("Candidate", back_populates="interviews")
    interviewer = db.relationship("Employee")
