from recruitment.extensions import db
from datetime import datetime
import uuid

class Department(db.Model):
    __tablename__ = "departments"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    employees = db.relationship("Employee", back_populates="department")
    job_postings = db.relationship("JobPosting", back_populates="department")

    def __repr__(self):
        return f"<Department {self.name}>"
