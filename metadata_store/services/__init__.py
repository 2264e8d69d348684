from metadata_store.services.metadata_backend import MetadataBackend
from metadata_store.services.sql_metadata_backend import SQLMetadataBackend
