"""One-time-password login use cases."""

from __future__ import annotations

from typing import Any

from showtimes.errors import UseCaseError
from showtimes.models import TokenUsers, UserDetailsResponse, VerifyData


class OtpUseCase:
    """Sends and verifies one-time passwords for phone login.

    ``config`` carries account_sid, auth_token and service_sid for the SMS
    verification service. ``repository`` provides
    find_user_by_mobile_number and user_details_using_phone. ``helper``
    provides twilio_setup, twilio_send_otp, twilio_verify_otp and
    generate_token_clients.
    """

    def __init__(self, config: Any, repository: Any, helper: Any) -> None:
        self.config = config
        self.repository = repository
        self.helper = helper

    def _setup(self) -> None:
        self.helper.twilio_setup(self.config.account_sid, self.config.auth_token)

    def send_otp(self, phone: str) -> None:
        if not self.repository.find_user_by_mobile_number(phone):
            raise UseCaseError("the user doesnot exist")
        self._setup()
        try:
            self.helper.twilio_send_otp(phone, self.config.service_sid)
        except Exception as exc:
            raise UseCaseError("error occured while generating OTP") from exc

    def verify_otp(self, code: VerifyData) -> TokenUsers:
        self._setup()
        try:
            self.helper.twilio_verify_otp(
                self.config.service_sid, code.code, code.phone_number
            )
        except Exception as exc:
            raise UseCaseError("errors while verifying") from exc

        details = self.repository.user_details_using_phone(code.phone_number)
        token = self.helper.generate_token_clients(details)
        user = UserDetailsResponse(
            id=int(getattr(details, "id", 0)),
            name=getattr(details, "name", ""),
            email=getattr(details, "email", ""),
            phone=getattr(details, "phone", ""),
        )
        return TokenUsers(users=user, token=token)