"""
Shared fixtures for the recruitment test-suite.

Each test gets a fresh in-memory SQLite schema inside a pushed app context,
so services can be called directly and the Flask test client can be used for
the HTTP layer.
"""
import itertools
from datetime import date

import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from recruitment import create_app
from recruitment.extensions import db
from recruitment.models import Candidate, Department, Employee, JobPosting, Skill

_seq = itertools.count(1)


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def headers_for(app):
    """Build Authorization headers for a staff member with the given role."""
    def _headers(role="hr"):
        token = create_access_token(
            identity=f"user-{role}",
            additional_claims={"role": role, "email": f"{role}@hr-recruitment.io"},
        )
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def auth_headers(headers_for):
    return headers_for("hr")


# ============================================================================
# FACTORIES
# ============================================================================

@pytest.fixture
def department_factory(app):
    def _make(**overrides):
        fields = {"name": f"Department {next(_seq)}"}
        fields.update(overrides)
        department = Department(**fields)
        db.session.add(department)
        db.session.commit()
        return department
    return _make


@pytest.fixture
def employee_factory(app, department_factory):
    def _make(**overrides):
        n = next(_seq)
        fields = {
            "first_name": "Existing",
            "last_name": f"Employee{n}",
            "email": f"employee{n}@acme-corp.io",
            "job_title": "Engineer",
            "job_type": "FULL_TIME",
            "hire_date": date(2022, 1, 10),
        }
        fields.update(overrides)
        if "department_id" not in fields:
            fields["department_id"] = department_factory().id
        employee = Employee(**fields)
        db.session.add(employee)
        db.session.commit()
        return employee
    return _make


@pytest.fixture
def skill_factory(app):
    def _make(name=None):
        skill = Skill(name=name or f"Skill {next(_seq)}")
        db.session.add(skill)
        db.session.commit()
        return skill
    return _make


@pytest.fixture
def job_factory(app, department_factory):
    def _make(**overrides):
        fields = {
            "title": "Backend Engineer",
            "description": "Build and run the services of the HR platform.",
            "is_active": True,
        }
        fields.update(overrides)
        if "department_id" not in fields:
            fields["department_id"] = department_factory().id
        job = JobPosting(**fields)
        db.session.add(job)
        db.session.commit()
        return job
    return _make


@pytest.fixture
def candidate_factory(app, job_factory):
    def _make(**overrides):
        n = next(_seq)
        fields = {
            "first_name": "Jane",
            "last_name": f"Doe{n}",
            "email": f"jane.doe{n}@mail-candidates.io",
            "phone": "+62811000111",
            "stage": "APPLIED",
        }
        fields.update(overrides)
        if "job_posting_id" not in fields:
            fields["job_posting_id"] = job_factory().id
        candidate = Candidate(**fields)
        db.session.add(candidate)
        db.session.commit()
        return candidate
    return _make


def fresh(model, pk):
    """Reload a row, ignoring whatever the identity map still holds."""
    db.session.expire_all()
    return db.session.get(model, pk)
