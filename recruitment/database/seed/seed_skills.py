from recruitment.extensions import db
from recruitment.models import Skill

SKILLS = ["Python", "SQL", "React", "Docker", "Communication", "Data Modeling"]

def seed():
    print("🌱 Seeding skills...")
    for name in SKILLS:
        if Skill.query.filter_by(name=name).first():
            print(f"⚠️ Skill '{name}' already exists. Skipping insert.")
            continue
        db.session.add(Skill(name=name))
    db.session.commit()
    print("✅ Skills seeded successfully!")
