from recruitment.extensions import db
from recruitment.models import Department, Employee
from datetime import date

DEPARTMENTS = [
    ("Engineering", "Product and platform engineering"),
    ("Data", "Analytics, data engineering and BI"),
    ("People", "Human resources and talent acquisition"),
]

def seed():
    print("🌱 Seeding departments and managers...")

    for name, description in DEPARTMENTS:
        if not Department.query.filter_by(name=name).first():
            db.session.add(Department(name=name, description=description))
    db.session.flush()

    engineering = Department.query.filter_by(name="Engineering").first()
    if not Employee.query.filter_by(email="lead.engineer@hr-recruitment.io").first():
        db.session.add(Employee(
            first_name="Maya",
            last_name="Santoso",
            email="lead.engineer@hr-recruitment.io",
            job_title="Engineering Manager",
            job_type="FULL_TIME",
            department_id=engineering.id,
            hire_date=date(2021, 3, 1),
        ))

    db.session.commit()
    print("✅ Departments seeded successfully!")
