import time
import uuid

from pydantic import BaseModel, Field


class Token(BaseModel):
    token: str = Field(..., example="0f8d6c2e-7d39-4bd3-9a0c-5b8c0b1f4e55", description="Token value")
    creation_date: int = Field(0, description="Seconds since epoch at which the token was created")
    comment: str = Field("", example="CI uploader", description="Free text describing the token")

    class Config:
        from_attributes = True

    @classmethod
    def new(cls, comment: str = "") -> "Token":
        return cls(token=str(uuid.uuid4()), creation_date=int(time.time()), comment=comment)


class User(BaseModel):
    id: str = Field(..., example="google:1234", description="User identifier")
    login: str = Field("", description="Login of the user")
    name: str = Field("", description="Display name of the user")
    email: str = Field("", example="user@example.com", description="Email address of the user")
    tokens: list[Token] = Field(default_factory=list, description="Authentication tokens owned by the user")

    class Config:
        from_attributes = True

    def new_token(self, comment: str = "") -> Token:
        token = Token.new(comment)
        self.tokens.append(token)
        return token
