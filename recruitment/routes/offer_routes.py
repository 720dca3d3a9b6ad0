from flask import Blueprint

import recruitment.databases as databases
from recruitment.permissions import CREATE, permission_required
from recruitment.routes.helpers import parse_body
from recruitment.schemas import ContractRequest, OfferRequest, OnboardingRequest
from recruitment.services import OfferService
from recruitment.utils import response

offers_bp = Blueprint("offers", __name__)


@offers_bp.route("/offers/<candidate_id>", methods=["POST"])
@permission_required(CREATE)
def generate_offer_letter(candidate_id):
    payload = parse_body(OfferRequest)
    offer = OfferService.generate_offer_letter(candidate_id, **payload.model_dump())
    return response.success(offer, "Offer letter generated", 201)


@offers_bp.route("/contracts/<candidate_id>", methods=["POST"])
@permission_required(CREATE)
def create_employment_contract(candidate_id):
    payload = parse_body(ContractRequest)
    contract = OfferService.create_employment_contract(candidate_id, **payload.model_dump())
    return response.success(databases.contract_to_dict(contract), "Contract created", 201)


@offers_bp.route("/onboarding/<candidate_id>", methods=["POST"])
@permission_required(CREATE)
def create_onboarding_checklist(candidate_id):
    payload = parse_body(OnboardingRequest)
    tasks = [t.model_dump(mode="json", by_alias=True) for t in payload.tasks]
    checklist = OfferService.create_onboarding_checklist(candidate_id, tasks)
    return response.success(checklist, "Onboarding checklist created", 201)
