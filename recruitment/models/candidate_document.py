from recruitment.extensions import db
from datetime import datetime
import uuid

DOCUMENT_TYPES = ("RESUME", "COVER_LETTER", "PORTFOLIO", "CERTIFICATE", "OTHER")

class CandidateDocument(db.Model):
    __tablename__ = "candidate_documents"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    file_url = db.Column(db.String(500))
    document_type = db.Column(db.Enum(*DOCUMENT_TYPES, name="candidate_document_type"), nullable=False, default="OTHER")
    uploaded_at = db.Column(db.DateTime, default=datetime.utcnow)

    candidate = db.relationship("Candidate", back_populates="documents")
