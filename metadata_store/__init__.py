from metadata_store.config import MetadataBackendConfig
from metadata_store.errors import MetadataError, NotFoundError, StoreError, ValidationError
from metadata_store.schemas import File, Token, Upload, User
from metadata_store.services import MetadataBackend, SQLMetadataBackend
from metadata_store.utils.log import RequestContext
