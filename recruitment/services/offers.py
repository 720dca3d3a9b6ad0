# recruitment/services/offers.py
"""
Paperwork around an accepted candidate: offer letters, contracts, onboarding
checklists and candidate notifications.

Offer letters, checklists and notifications are returned as plain payloads
for the client to render or deliver; only contracts are persisted.
"""
import logging
from datetime import datetime

import recruitment.databases as databases
from recruitment.errors import EmployeeNotFoundError
from recruitment.services.recruitment import RecruitmentService
from recruitment.unit_of_work import atomic
from recruitment.utils.dates import to_date

logger = logging.getLogger(__name__)


class OfferService:

    @staticmethod
    def generate_offer_letter(candidate_id, salary, start_date, position=None, template="standard"):
        candidate = RecruitmentService.get_candidate(candidate_id)
        job = candidate.job_posting
        return {
            "candidateId": candidate.id,
            "title": f"Offer for {candidate.full_name}",
            "position": position or (job.title if job else ""),
            "salary": salary,
            "startDate": to_date(start_date).isoformat(),
            "template": template or "standard",
            "generatedAt": datetime.utcnow().isoformat(),
        }

    @staticmethod
    def create_employment_contract(candidate_id, employee_id, start_date, end_date=None, document=None):
        # contracts hang off the employee, the candidate is only the entry point
        with atomic():
            if not databases.get_employee_by_id(employee_id):
                raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")
            contract = databases.create_contract(
                employee_id,
                to_date(start_date),
                end_date=to_date(end_date),
                document=document or None,
            )
        logger.info(f"📄 Contract {contract.id} created for employee {employee_id} (candidate {candidate_id})")
        return contract

    @staticmethod
    def create_onboarding_checklist(candidate_id, tasks=None):
        candidate = RecruitmentService.get_candidate(candidate_id)
        return {
            "candidateId": candidate.id,
            "title": f"Onboarding for {candidate.full_name}",
            "tasks": tasks or [],
        }

    @staticmethod
    def notify_candidate(candidate_id, subject, message, channel="email"):
        # returns the message for the caller to deliver; nothing is sent from here
        RecruitmentService.get_candidate(candidate_id)
        logger.info(f"✉️ Notification '{subject}' prepared for candidate {candidate_id} via {channel}")
        return {
            "candidateId": candidate_id,
            "channel": channel,
            "subject": subject,
            "message": message,
            "sentAt": datetime.utcnow().isoformat(),
        }
