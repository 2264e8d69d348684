from sqlalchemy.exc import SQLAlchemyError

from metadata_store.config import MetadataBackendConfig
from metadata_store.services.sql_metadata_backend import SQLMetadataBackend

config = MetadataBackendConfig.from_env()
backend = SQLMetadataBackend(config)

try:
    backend.init_schema()
    print(f"Tables created on {config.safe_dsn()}")
except SQLAlchemyError as error:
    print(f"Unable to create tables : {error}")
    raise SystemExit(1)
finally:
    backend.dispose()
