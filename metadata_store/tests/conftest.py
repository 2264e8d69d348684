import pytest
from sqlalchemy import create_engine, StaticPool

from metadata_store.config import MetadataBackendConfig
from metadata_store.database import Base
from metadata_store.schemas import File, Token, Upload, User
from metadata_store.services.sql_metadata_backend import SQLMetadataBackend
from metadata_store.utils.log import RequestContext

DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(DATABASE_URL,
                       connect_args={
                           "check_same_thread": False,
                       },
                       poolclass=StaticPool)


@pytest.fixture
def backend():
    return SQLMetadataBackend(MetadataBackendConfig(url=DATABASE_URL), engine=engine)


@pytest.fixture
def ctx():
    return RequestContext(request_id="test")


@pytest.fixture(autouse=True)
def setup_and_teardown():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload():
    upload = Upload(id="u1", creation=1_000_000, ttl=10, user="user1", token="token1")
    upload.add_file(File(id="f1", name="report.pdf", current_size=4005, backend_details={"path": "u1/f1"}))
    upload.add_file(File(id="f2", name="notes.txt", current_size=12))
    return upload


@pytest.fixture
def user():
    return User(id="user1", login="john", name="John Doe", email="john@example.com",
                tokens=[Token(token="token1", creation_date=1_000_000, comment="cli"),
                        Token(token="token2", creation_date=1_000_100)])
