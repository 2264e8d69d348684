from sqlalchemy import Column, BigInteger, String, ForeignKey

from metadata_store.database import Base
from metadata_store.schemas.user_schema import Token


class TokenRow(Base):
    """A Token plus the identifier of the user owning it."""
    __tablename__ = "usersTokens"

    token = Column(String(255), primary_key=True)
    user_id = Column("userId", String(255), ForeignKey("users.id"), nullable=False, index=True)
    creation_date = Column("creationDate", BigInteger, nullable=False, default=0)
    comment = Column(String(255), nullable=False, default="")

    @classmethod
    def from_domain(cls, token: Token, user_id: str) -> "TokenRow":
        return cls(user_id=user_id, **token.model_dump())

    def to_domain(self) -> Token:
        return Token(token=self.token, creation_date=self.creation_date, comment=self.comment)
