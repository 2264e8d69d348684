from metadata_store.celery_app import tasks
from metadata_store.schemas import Upload


def test_beat_schedule_runs_cleanup():
    schedule = tasks.celery_app.conf.beat_schedule["remove-expired-uploads"]
    assert schedule["task"] == tasks.remove_expired_uploads.name


def test_remove_expired_uploads_task(backend, monkeypatch):
    backend.create(None, Upload(id="old", creation=1, ttl=1))
    backend.create(None, Upload(id="forever", creation=1, ttl=0))
    monkeypatch.setattr(tasks, "_backend", backend)

    assert tasks.remove_expired_uploads() == ["old"]
    assert backend.get_uploads_to_remove(None) == []
