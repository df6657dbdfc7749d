from pydantic import BaseModel
from datetime import datetime


class LoginRequest(BaseModel):
    password: str


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class SessionInfo(BaseModel):
    authenticated: bool = True
    expires_at: datetime
