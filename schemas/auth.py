from pydantic import BaseModel, SecretStr


class RegisterIn(BaseModel):
    username: str | None = None
    password: SecretStr | None = None


class LoginIn(RegisterIn):
    pass


class TokenPayload(BaseModel):
    sub: str
    iat: int | None = None
    exp: int | None = None
