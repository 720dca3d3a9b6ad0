from ..extensions import db
from datetime import datetime
import uuid

USER_ROLES = ("admin", "hr", "manager", "employee")

class User(db.Model):
    """Staff account used to sign in to the recruitment back office."""
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255))
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(*USER_ROLES, name="user_roles"), nullable=False, default="hr")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # for string representation
    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
