from metadata_store.celery_app.config import celery_app
from metadata_store.services import cleanup
from metadata_store.services.sql_metadata_backend import SQLMetadataBackend
from metadata_store.utils.log import RequestContext

_backend = None


def get_backend() -> SQLMetadataBackend:
    global _backend
    if _backend is None:
        _backend = SQLMetadataBackend()
    return _backend


@celery_app.task(bind=True)
def remove_expired_uploads(self):
    ctx = RequestContext(request_id=self.request.id or "beat", logger_name="cleanup")
    return cleanup.remove_expired_uploads(get_backend(), ctx)
