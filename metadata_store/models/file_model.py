from sqlalchemy import Column, BigInteger, String, JSON, ForeignKey

from metadata_store.database import Base
from metadata_store.schemas.upload_schema import File


class FileRow(Base):
    """A File plus the identifier of the upload it belongs to."""
    __tablename__ = "files"

    id = Column(String(255), primary_key=True)
    upload_id = Column("uploadId", String(255), ForeignKey("uploads.id"), nullable=False, index=True)
    name = Column("fileName", String(1024), nullable=False, default="")
    md5 = Column("fileMd5", String(64), nullable=False, default="")
    status = Column(String(32), nullable=False, default="")
    type = Column("fileType", String(255), nullable=False, default="")
    upload_date = Column("fileUploadDate", BigInteger, nullable=False, default=0)
    current_size = Column("fileSize", BigInteger, nullable=False, default=0)
    reference = Column(String(255), nullable=False, default="")
    backend_details = Column("backendDetails", JSON, nullable=True)

    @classmethod
    def from_domain(cls, file: File, upload_id: str) -> "FileRow":
        return cls(upload_id=upload_id, **file.model_dump())

    def to_domain(self) -> File:
        return File(
            id=self.id,
            name=self.name,
            md5=self.md5,
            status=self.status,
            type=self.type,
            upload_date=self.upload_date,
            current_size=self.current_size,
            reference=self.reference,
            backend_details=self.backend_details or {},
        )
