# backend/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, status

from schemas.user import AuthResult, LoginRequest, OtpRequest, SessionOut
from utils.auth_session import AuthSession
from utils.dependencies import get_auth_session

router = APIRouter(prefix="/auth", tags=["Auth"])

# Ask the backend to send a one-time password
@router.post("/otp", response_model=AuthResult)
async def send_otp(payload: OtpRequest, session: AuthSession = Depends(get_auth_session)):
    result = await session.send_otp(payload.phone_number)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return result

# Log in with phone number + OTP and keep the token in the token slot
@router.post("/login", response_model=AuthResult)
async def login(payload: LoginRequest, session: AuthSession = Depends(get_auth_session)):
    result = await session.login(payload.phone_number, payload.otp)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.error)
    return result

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(session: AuthSession = Depends(get_auth_session)):
    session.logout()

# Current session, verified against the backend
@router.get("/me", response_model=SessionOut)
async def me(session: AuthSession = Depends(get_auth_session)):
    await session.verify()
    return SessionOut(is_authenticated=session.is_authenticated, user=session.user)
