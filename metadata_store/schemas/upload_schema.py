import time
import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field


class File(BaseModel):
    id: str = Field(..., example="a1b2c3d4", description="File identifier, unique within its upload")
    name: str = Field("", example="report.pdf", description="File name provided by the uploader")
    md5: str = Field("", description="MD5 checksum of the file content")
    status: str = Field("", example="uploaded", description="Upload status of the file")
    type: str = Field("", example="application/pdf", description="Content type")
    upload_date: int = Field(0, description="Seconds since epoch at which the file was received")
    current_size: int = Field(0, example=4005, description="File size in bytes")
    reference: str = Field("", description="Client side reference of the file")
    backend_details: dict[str, Any] = Field(default_factory=dict,
                                            description="Data-backend specific details")

    class Config:
        from_attributes = True

    @classmethod
    def new(cls, **fields) -> "File":
        fields.setdefault("id", uuid.uuid4().hex[:16])
        return cls(**fields)


class Upload(BaseModel):
    id: str = Field(..., example="Xk3pQ9aZ", description="Upload identifier")
    creation: int = Field(0, description="Seconds since epoch at which the upload was created")
    ttl: int = Field(0, example=86400, description="Time to live in seconds, 0 means the upload never expires")
    user: Optional[str] = Field(None, description="Identifier of the owning user")
    token: Optional[str] = Field(None, description="Token used to create the upload")
    comments: str = Field("", description="Free text attached to the upload")
    upload_token: str = Field("", description="Secret allowing to add files to the upload")
    remote_ip: str = Field("", description="Address the upload was created from")
    short_url: str = Field("", description="Shortened URL of the upload")
    stream: bool = False
    one_shot: bool = False
    removable: bool = False
    protected_by_password: bool = False
    login: str = ""
    password: str = ""
    protected_by_yubikey: bool = False
    yubikey: str = ""
    files: dict[str, File] = Field(default_factory=dict, description="Files of the upload keyed by file id")

    class Config:
        from_attributes = True

    @classmethod
    def new(cls, **fields) -> "Upload":
        fields.setdefault("id", uuid.uuid4().hex[:16])
        fields.setdefault("creation", int(time.time()))
        return cls(**fields)

    def add_file(self, file: File) -> File:
        self.files[file.id] = file
        return file
