# recruitment/services/auth.py
import logging
from datetime import timedelta

from flask import current_app
from flask_jwt_extended import create_access_token

import recruitment.databases as databases
from recruitment.errors import AuthenticationError, EmailAlreadyRegisteredError
from recruitment.extensions import bcrypt
from recruitment.models.user import User
from recruitment.unit_of_work import atomic

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def issue_token(user):
        """JWT for a staff user; ``role`` drives the permission checks."""
        hours = current_app.config.get("JWT_ACCESS_TOKEN_HOURS", 3)
        return create_access_token(
            identity=str(user.id),
            additional_claims={
                "role": user.role,
                "email": user.email
            },
            expires_delta=timedelta(hours=hours)
        )

    @staticmethod
    def authenticate_user(email, password):
        user = databases.get_user_by_email(email)

        # same message for unknown email and wrong password
        if not user or not bcrypt.check_password_hash(user.password, password):
            logger.warning(f"❌ Failed login for {email}")
            raise AuthenticationError()

        logger.info(f"✅ Auth successful for {email}, role: {user.role}")
        return AuthService.issue_token(user)

    @staticmethod
    def register(name, email, password, role="hr"):
        if databases.get_user_by_email(email):
            logger.warning(f"❌ Email already registered: {email}")
            raise EmailAlreadyRegisteredError()

        with atomic() as session:
            user = User(
                name=name,
                email=email,
                password=bcrypt.generate_password_hash(password).decode("utf-8"),
                role=role
            )
            session.add(user)

        logger.info(f"📝 Registered {role} account {email}")
        return user, AuthService.issue_token(user)
