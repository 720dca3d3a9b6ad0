# recruitment/models/employee.py
# Employees belong to the wider HR system; recruitment only creates them when hiring.
from recruitment.extensions import db
from datetime import datetime
import uuid

JOB_TYPES = ("FULL_TIME", "PART_TIME", "CONTRACT", "INTERN")

class Employee(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(50))
    job_title = db.Column(db.String(255))
    job_type = db.Column(db.Enum(*JOB_TYPES, name="employee_job_type"), nullable=False, default="FULL_TIME")
    department_id = db.Column(db.String(36), db.ForeignKey("departments.id"), nullable=False)
    manager_id = db.Column(db.String(36), db.ForeignKey("employees.id"))
    salary = db.Column(db.Numeric(12, 2))
    hire_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    department = db.relationship("Department", back_populates="employees")
    manager = db.relationship("Employee", remote_side=[id], backref="reports")
    contracts = db.relationship("Contract", back_populates="employee", cascade="all, delete-orphan")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Employee {self.email}>"
