from recruitment.extensions import db
from recruitment.models import User
from flask_bcrypt import generate_password_hash

def seed():
    print("🌱 Seeding staff users...")

    users = [
        User(
            name="HR Admin",
            email="admin@hr-recruitment.io",
            password=generate_password_hash("password123").decode("utf-8"),
            role="admin",
        ),
        User(
            name="Recruiter One",
            email="recruiter@hr-recruitment.io",
            password=generate_password_hash("password123").decode("utf-8"),
            role="hr",
        ),
        User(
            name="Hiring Manager",
            email="manager@hr-recruitment.io",
            password=generate_password_hash("password123").decode("utf-8"),
            role="manager",
        ),
    ]

    # prevent duplicates
    for user in users:
        existing = User.query.filter_by(email=user.email).first()
        if not existing:
            db.session.add(user)

    db.session.commit()
    print("✅ Users seeded successfully!")
