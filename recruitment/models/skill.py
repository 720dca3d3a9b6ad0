from recruitment.extensions import db
import uuid

class Skill(db.Model):
    __tablename__ = "skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), unique=True, nullable=False)

    job_posting_skills = db.relationship("JobPostingSkill", back_populates="skill")
