from metadata_store.models.upload_model import UploadRow
from metadata_store.models.file_model import FileRow
from metadata_store.models.user_model import UserRow
from metadata_store.models.token_model import TokenRow
