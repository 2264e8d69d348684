from sqlalchemy import Column, Integer, BigInteger, String, Text, Boolean

from metadata_store.database import Base
from metadata_store.schemas.upload_schema import Upload


class UploadRow(Base):
    __tablename__ = "uploads"

    id = Column(String(255), primary_key=True)
    creation = Column("uploadDate", BigInteger, nullable=False, default=0)
    ttl = Column(Integer, nullable=False, default=0, index=True)
    user = Column(String(255), nullable=True, index=True)
    token = Column(String(255), nullable=True)
    comments = Column(Text, nullable=False, default="")
    upload_token = Column("uploadToken", String(255), nullable=False, default="")
    remote_ip = Column("remoteIp", String(255), nullable=False, default="")
    short_url = Column("shortUrl", String(255), nullable=False, default="")
    stream = Column(Boolean, nullable=False, default=False)
    one_shot = Column("oneShot", Boolean, nullable=False, default=False)
    removable = Column(Boolean, nullable=False, default=False)
    protected_by_password = Column("protectedByPassword", Boolean, nullable=False, default=False)
    login = Column(String(255), nullable=False, default="")
    password = Column(String(255), nullable=False, default="")
    protected_by_yubikey = Column("protectedByYubikey", Boolean, nullable=False, default=False)
    yubikey = Column(String(255), nullable=False, default="")

    @classmethod
    def from_domain(cls, upload: Upload) -> "UploadRow":
        return cls(**upload.model_dump(exclude={"files"}))

    def to_domain(self) -> Upload:
        return Upload.model_validate(self)
