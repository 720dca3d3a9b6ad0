from recruitment.extensions import db
from recruitment.models import Department, JobPosting, JobPostingSkill, Skill

def seed():
    print("🌱 Seeding job postings...")

    engineering = Department.query.filter_by(name="Engineering").first()
    data = Department.query.filter_by(name="Data").first()
    if not engineering or not data:
        print("⚠️ No departments found! Please seed departments first.")
        return

    skills = {s.name: s for s in Skill.query.all()}

    jobs = [
        (
            JobPosting(
                title="Backend Engineer",
                description=(
                    "Design, build and operate the Python services behind the HR platform. "
                    "You will own APIs, background jobs and their relational data models."
                ),
                department_id=engineering.id,
            ),
            [("Python", True, 4), ("SQL", True, 3), ("Docker", False, 2)],
        ),
        (
            JobPosting(
                title="Data Engineer",
                description=(
                    "Maintain ETL pipelines and the reporting warehouse used by HR analytics. "
                    "Experience with SQL modelling and Python tooling is expected."
                ),
                department_id=data.id,
            ),
            [("SQL", True, 4), ("Data Modeling", True, 3), ("Python", False, 3)],
        ),
    ]

    for job, requirements in jobs:
        existing_job = JobPosting.query.filter_by(title=job.title).first()
        if existing_job:
            print(f"⚠️ Job '{job.title}' already exists. Skipping insert.")
            continue
        job.skills = [
            JobPostingSkill(skill_id=skills[name].id, required=required, min_level=level)
            for name, required, level in requirements
            if name in skills
        ]
        db.session.add(job)

    db.session.commit()
    print("✅ Job postings seeded successfully!")
