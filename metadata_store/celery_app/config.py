import os

from celery import Celery
from dotenv import load_dotenv

load_dotenv()

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CLEANUP_INTERVAL = int(os.getenv("CLEANUP_INTERVAL", "600"))

celery_app = Celery(
    "metadata_store",
    broker=REDIS_URL,
    backend=REDIS_URL
)

celery_app.conf.beat_schedule = {
    "remove-expired-uploads": {
        "task": "metadata_store.celery_app.tasks.remove_expired_uploads",
        "schedule": CLEANUP_INTERVAL,
    },
}

celery_app.autodiscover_tasks(["metadata_store.celery_app"])
