"""Admin login contracts."""

from pydantic import Field

from voipfit.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    success: bool = True
    admin_id: int
