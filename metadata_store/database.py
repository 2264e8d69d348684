import sqlalchemy as sa
from sqlalchemy.orm import sessionmaker, declarative_base

from metadata_store.config import MetadataBackendConfig

Base = declarative_base()


def create_db_engine(config: MetadataBackendConfig):
    return sa.create_engine(config.dsn(), pool_pre_ping=True, echo=config.debug)


def create_session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
