from typing import Optional

from metadata_store.errors import NotFoundError
from metadata_store.services.metadata_backend import MetadataBackend
from metadata_store.utils.log import RequestContext, context_logger, get_logger

logger = get_logger(__name__)


def remove_expired_uploads(backend: MetadataBackend, ctx: Optional[RequestContext] = None,
                           now: Optional[int] = None) -> list[str]:
    """
    Remove every upload whose ttl has elapsed and return the removed ids.

    The expiry scan is a snapshot: an upload may disappear before we reach it
    (another sweeper, a user deleting it). Those ids are skipped.
    """
    log = context_logger(ctx, logger)

    removed = []
    for upload_id in backend.get_uploads_to_remove(ctx, now=now):
        try:
            upload = backend.get(ctx, upload_id)
        except NotFoundError:
            log.info("Upload %s already removed", upload_id)
            continue

        backend.remove(ctx, upload)
        removed.append(upload_id)

    if removed:
        log.info("Removed %d expired uploads", len(removed))
    return removed
