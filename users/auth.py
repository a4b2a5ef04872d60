"""
Account services used by the sign-up and sign-out pages.

``CognitoAuthService`` talks to the Cognito user pool configured through
``COGNITO_*`` settings; ``LocalAuthService`` keeps accounts in Django's user
table and is selected when Cognito is not configured.  Both expose
``create_account(email, password)`` and ``sign_out(request)``.
"""
import base64
import hashlib
import hmac
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings
from django.contrib.auth import get_user_model, logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class AccountCreationError(Exception):
    """Account creation was refused; ``message`` comes from the auth service."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SignOutError(Exception):
    pass


def client_error_message(exc: ClientError) -> str:
    error = exc.response.get("Error", {})
    return error.get("Message") or error.get("Code") or str(exc)


class CognitoAuthService:
    def __init__(self, client=None):
        self.region = getattr(settings, "COGNITO_REGION", "") or ""
        self.pool_id = getattr(settings, "COGNITO_USER_POOL_ID", "") or ""
        self.client_id = getattr(settings, "COGNITO_APP_CLIENT_ID", "") or ""
        self.client_secret = getattr(settings, "COGNITO_APP_CLIENT_SECRET", "") or ""
        self.client = client or boto3.client("cognito-idp", region_name=self.region)

    def secret_hash(self, username: str) -> str:
        """SECRET_HASH required by app clients that have a client secret."""
        message = (username + self.client_id).encode("utf-8")
        digest = hmac.new(self.client_secret.encode("utf-8"), message, hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def create_account(self, email: str, password: str) -> str:
        email = (email or "").strip()
        params = {
            "ClientId": self.client_id,
            "Username": email,
            "Password": password or "",
            "UserAttributes": [{"Name": "email", "Value": email}],
        }
        if self.client_secret:
            params["SecretHash"] = self.secret_hash(email)

        try:
            response = self.client.sign_up(**params)
        except ClientError as exc:
            message = client_error_message(exc)
            logger.warning("Cognito sign-up refused for %s: %s", email, message)
            raise AccountCreationError(message) from exc
        except BotoCoreError as exc:
            logger.error("Cognito sign-up failed for %s: %s", email, exc)
            raise AccountCreationError(str(exc)) from exc

        logger.info("Cognito user created: email=%s sub=%s", email, response.get("UserSub"))
        return response.get("UserSub", "")

    def sign_out(self, request) -> None:
        """End the Django session and revoke the user's Cognito tokens."""
        user = getattr(request, "user", None)
        username = user.get_username() if user is not None and user.is_authenticated else ""
        logout(request)
        if not username:
            return
        try:
            self.client.admin_user_global_sign_out(UserPoolId=self.pool_id, Username=username)
        except (ClientError, BotoCoreError) as exc:
            raise SignOutError(f"Cognito global sign-out failed for {username}: {exc}") from exc
        logger.info("Cognito global sign-out for user: %s", username)


class LocalAuthService:
    """Accounts in Django's user table, username = email."""

    def create_account(self, email: str, password: str) -> str:
        email = (email or "").strip().lower()
        try:
            validate_email(email)
        except ValidationError as exc:
            raise AccountCreationError("Enter a valid email address.") from exc

        User = get_user_model()
        if User.objects.filter(username__iexact=email).exists():
            raise AccountCreationError("An account with this email already exists.")

        user = User(username=email, email=email)
        try:
            validate_password(password or "", user)
        except ValidationError as exc:
            raise AccountCreationError(" ".join(exc.messages)) from exc
        user.set_password(password)
        user.save()
        logger.info("Local user created: %s", email)
        return str(user.pk)

    def sign_out(self, request) -> None:
        logout(request)


def build_auth_service():
    return import_string(settings.NEWS_EVENTS["AUTH_SERVICE"])()
