from flask.cli import with_appcontext
from recruitment.database.seed.seed_users import seed as seed_users
from recruitment.database.seed.seed_departments import seed as seed_departments
from recruitment.database.seed.seed_skills import seed as seed_skills
from recruitment.database.seed.seed_jobs import seed as seed_jobs
from recruitment.database.seed.seed_candidates import seed as seed_candidates

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_users()
    seed_departments()
    seed_skills()
    seed_jobs()
    seed_candidates()
    click.echo("✅ All seeders completed!")
