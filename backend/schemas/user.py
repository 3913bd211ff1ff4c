from pydantic import BaseModel, Field
from typing import Any, Optional


# Request schema for requesting a one-time password
class OtpRequest(BaseModel):
    phone_number: str = Field(alias="phoneNumber")

# Request schema for phone + OTP login
class LoginRequest(OtpRequest):
    otp: str

# Outcome of an auth session call; failures carry the backend message
class AuthResult(BaseModel):
    success: bool
    error: Optional[str] = None
    data: Optional[Any] = None

# Current session state exposed to the UI
class SessionOut(BaseModel):
    is_authenticated: bool
    user: Optional[dict] = None
