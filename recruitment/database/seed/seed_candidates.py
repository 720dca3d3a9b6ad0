from recruitment.extensions import db
from recruitment.models import Candidate, JobPosting

def seed():
    print("🌱 Seeding candidates...")

    job = JobPosting.query.filter_by(title="Backend Engineer").first()
    if not job:
        print("⚠️ No jobs found! Please seed jobs first.")
        return

    candidates = [
        Candidate(
            job_posting_id=job.id,
            first_name="John",
            last_name="Doe",
            email="john.doe@mail-candidates.io",
            phone="+628123456789",
            stage="INTERVIEW",
            score=82,
        ),
        Candidate(
            job_posting_id=job.id,
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@mail-candidates.io",
            stage="APPLIED",
        ),
        Candidate(
            job_posting_id=job.id,
            first_name="Budi",
            last_name="Hartono",
            email="budi.hartono@mail-candidates.io",
            stage="REJECTED",
            score=41,
            feedback="Not enough backend experience",
        ),
    ]

    for candidate in candidates:
        existing = Candidate.query.filter_by(job_posting_id=job.id, email=candidate.email).first()
        if existing:
            continue
        db.session.add(candidate)

    db.session.commit()
    print("✅ Candidates seeded successfully!")
