"""
Contract shared by every metadata backend.

Upload handlers, expiry sweepers and authentication code only ever talk to
this interface. Operations raise `metadata_store.errors` exceptions instead
of returning error values.
"""
from abc import ABC, abstractmethod
from typing import Optional

from metadata_store.schemas.upload_schema import File, Upload
from metadata_store.schemas.user_schema import Token, User
from metadata_store.utils.log import RequestContext


class MetadataBackend(ABC):

    @abstractmethod
    def create(self, ctx: Optional[RequestContext], upload: Upload) -> None:
        """Persist a new upload together with its files, atomically."""

    @abstractmethod
    def get(self, ctx: Optional[RequestContext], upload_id: str) -> Upload:
        """Load an upload and its files. Raises NotFoundError for unknown ids."""

    @abstractmethod
    def add_or_update_file(self, ctx: Optional[RequestContext], upload: Upload, file: File) -> None:
        pass

    @abstractmethod
    def remove_file(self, ctx: Optional[RequestContext], upload: Upload, file: File) -> None:
        pass

    @abstractmethod
    def remove(self, ctx: Optional[RequestContext], upload: Upload) -> None:
        """Delete the files of an upload, then the upload itself."""

    @abstractmethod
    def get_uploads_to_remove(self, ctx: Optional[RequestContext], now: Optional[int] = None) -> list[str]:
        """Ids of uploads whose ttl is positive and elapsed at `now`."""

    @abstractmethod
    def save_user(self, ctx: Optional[RequestContext], user: User) -> None:
        pass

    @abstractmethod
    def get_user(self, ctx: Optional[RequestContext], user_id: str, token: str) -> Optional[User]:
        """Resolve a user by id, or by one of its tokens when id is empty. None when absent."""

    @abstractmethod
    def remove_user(self, ctx: Optional[RequestContext], user: User) -> None:
        pass

    @abstractmethod
    def get_user_uploads(self, ctx: Optional[RequestContext], user: User,
                         token: Optional[Token] = None) -> list[str]:
        pass
