from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required

from recruitment.routes.helpers import parse_body
from recruitment.schemas import LoginRequest, RegisterRequest
from recruitment.services import AuthService

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    payload = parse_body(LoginRequest)
    token = AuthService.authenticate_user(payload.email, payload.password)
    return jsonify({"access_token": token}), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    payload = parse_body(RegisterRequest)
    user, token = AuthService.register(payload.name, payload.email, payload.password, payload.role)
    return jsonify({
        "message": "Registration successful",
        "user": {"id": user.id, "name": user.name, "email": user.email, "role": user.role},
        "access_token": token,
    }), 201


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    claims = get_jwt()
    return jsonify({"id": get_jwt_identity(), "email": claims.get("email"), "role": claims.get("role")}), 200
