from metadata_store.schemas.upload_schema import File, Upload
from metadata_store.schemas.user_schema import Token, User
