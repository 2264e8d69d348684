import time
from typing import Optional

from sqlalchemy import delete, inspect, select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from metadata_store.config import MetadataBackendConfig
from metadata_store.database import Base, create_db_engine, create_session_factory
from metadata_store.errors import NotFoundError, StoreError, ValidationError
from metadata_store.models import FileRow, TokenRow, UploadRow, UserRow
from metadata_store.schemas.upload_schema import File, Upload
from metadata_store.schemas.user_schema import Token, User
from metadata_store.services.metadata_backend import MetadataBackend
from metadata_store.utils.log import RequestContext, context_logger, get_logger

logger = get_logger(__name__)


def _invalid(log, message: str) -> ValidationError:
    log.warning(message)
    return ValidationError(message)


def _store_error(log, message: str, error: Exception) -> StoreError:
    log.warning("%s : %s", message, error)
    return StoreError(f"{message} : {error}")


class SQLMetadataBackend(MetadataBackend):
    """
    Metadata backend storing uploads, files, users and tokens in a SQL database.

    The backend owns its engine. Each call opens its own session from the
    shared connection pool, so one instance can serve concurrent requests.
    """

    def __init__(self, config: Optional[MetadataBackendConfig] = None, engine=None):
        if config is None:
            config = MetadataBackendConfig() if engine is not None else MetadataBackendConfig.from_env()
        self.config = config

        if engine is None:
            engine = create_db_engine(self.config)
            logger.info("Using SQL server on %s", self.config.safe_dsn())
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)

    def init_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def create(self, ctx: Optional[RequestContext], upload: Upload) -> None:
        log = context_logger(ctx, logger)

        if upload is None:
            raise _invalid(log, "Unable to save upload : Missing upload")

        session = self.SessionLocal()
        message = "Unable to save upload"
        try:
            session.add(UploadRow.from_domain(upload))
            session.flush()

            message = "Unable to save upload file"
            for file in upload.files.values():
                session.add(FileRow.from_domain(file, upload.id))
                session.flush()
            session.commit()
        except SQLAlchemyError as error:
            session.rollback()
            raise _store_error(log, message, error) from error
        finally:
            session.close()

    def get(self, ctx: Optional[RequestContext], upload_id: str) -> Upload:
        log = context_logger(ctx, logger)

        if not upload_id:
            raise _invalid(log, "Unable to get upload : Missing upload id")

        session = self.SessionLocal()
        try:
            row = session.get(UploadRow, upload_id)
            if row is None:
                raise NotFoundError(f"Upload {upload_id} not found")
            upload = row.to_domain()

            files = session.scalars(select(FileRow).where(FileRow.upload_id == upload_id)).all()
            for file in files:
                upload.files[file.id] = file.to_domain()
        except SQLAlchemyError as error:
            raise _store_error(log, "Unable to get upload", error) from error
        finally:
            session.close()

        log.debug("Loaded upload %s", upload.model_dump_json())
        return upload

    def add_or_update_file(self, ctx: Optional[RequestContext], upload: Upload, file: File) -> None:
        log = context_logger(ctx, logger)

        if upload is None:
            raise _invalid(log, "Unable to add file : Missing upload")
        if file is None:
            raise _invalid(log, "Unable to add file : Missing file")

        session = self.SessionLocal()
        try:
            session.execute(self._upsert_file_statement(FileRow.from_domain(file, upload.id)))
            session.commit()
        except SQLAlchemyError as error:
            session.rollback()
            raise _store_error(log, "Unable to update file in upload", error) from error
        finally:
            session.close()

    def remove_file(self, ctx: Optional[RequestContext], upload: Upload, file: File) -> None:
        log = context_logger(ctx, logger)

        if upload is None:
            raise _invalid(log, "Unable to remove file : Missing upload")
        if file is None:
            raise _invalid(log, "Unable to remove file : Missing file")

        self._execute(log, "Unable to remove file from upload",
                      delete(FileRow).where(FileRow.id == file.id, FileRow.upload_id == upload.id))

    def remove(self, ctx: Optional[RequestContext], upload: Upload) -> None:
        log = context_logger(ctx, logger)

        if upload is None:
            raise _invalid(log, "Unable to remove upload : Missing upload")

        # files first, a failure here leaves the upload row in place
        self._execute(log, "Unable to delete upload files",
                      delete(FileRow).where(FileRow.upload_id == upload.id))
        self._execute(log, "Unable to delete upload",
                      delete(UploadRow).where(UploadRow.id == upload.id))

    def get_uploads_to_remove(self, ctx: Optional[RequestContext], now: Optional[int] = None) -> list[str]:
        log = context_logger(ctx, logger)

        if now is None:
            now = int(time.time())

        query = select(UploadRow.id).where(UploadRow.ttl > 0, UploadRow.creation + UploadRow.ttl < now)
        session = self.SessionLocal()
        try:
            return list(session.scalars(query).all())
        except SQLAlchemyError as error:
            raise _store_error(log, "Unable to get uploads to remove", error) from error
        finally:
            session.close()

    def save_user(self, ctx: Optional[RequestContext], user: User) -> None:
        log = context_logger(ctx, logger)

        if user is None:
            raise _invalid(log, "Unable to save user : Missing user")

        session = self.SessionLocal()
        message = "Unable to save user"
        try:
            session.merge(UserRow.from_domain(user))
            session.flush()

            message = "Unable to save user token"
            for token in user.tokens:
                row = session.get(TokenRow, token.token)
                if row is None:
                    session.add(TokenRow.from_domain(token, user.id))
                else:
                    row.user_id = user.id
                    row.creation_date = token.creation_date
                    row.comment = token.comment
                session.flush()
            session.commit()
        except SQLAlchemyError as error:
            session.rollback()
            raise _store_error(log, message, error) from error
        finally:
            session.close()

    def get_user(self, ctx: Optional[RequestContext], user_id: str, token: str) -> Optional[User]:
        log = context_logger(ctx, logger)

        if not user_id and not token:
            raise _invalid(log, "Unable to get user : Missing user id or token")

        session = self.SessionLocal()
        try:
            if not user_id:
                token_row = session.get(TokenRow, token)
                if token_row is None:
                    return None
                user_id = token_row.user_id

            row = session.get(UserRow, user_id)
            if row is None:
                return None

            tokens = session.scalars(select(TokenRow).where(TokenRow.user_id == row.id)).all()
            return row.to_domain(tokens)
        except SQLAlchemyError as error:
            raise _store_error(log, "Unable to get user", error) from error
        finally:
            session.close()

    def remove_user(self, ctx: Optional[RequestContext], user: User) -> None:
        log = context_logger(ctx, logger)

        if user is None:
            raise _invalid(log, "Unable to remove user : Missing user")

        self._execute(log, "Unable to delete user tokens",
                      delete(TokenRow).where(TokenRow.user_id == user.id))
        self._execute(log, "Unable to delete user",
                      delete(UserRow).where(UserRow.id == user.id))

    def get_user_uploads(self, ctx: Optional[RequestContext], user: User,
                         token: Optional[Token] = None) -> list[str]:
        log = context_logger(ctx, logger)

        if user is None:
            raise _invalid(log, "Unable to get user uploads : Missing user")

        query = select(UploadRow.id).where(UploadRow.user == user.id)
        if token is not None:
            query = query.where(UploadRow.token == token.token)

        session = self.SessionLocal()
        try:
            return list(session.scalars(query).all())
        except SQLAlchemyError as error:
            raise _store_error(log, "Unable to get user uploads", error) from error
        finally:
            session.close()

    def _execute(self, log, message: str, statement) -> None:
        session = self.SessionLocal()
        try:
            session.execute(statement)
            session.commit()
        except SQLAlchemyError as error:
            session.rollback()
            raise _store_error(log, message, error) from error
        finally:
            session.close()

    def _upsert_file_statement(self, row: FileRow):
        """Single-statement insert-or-update, so concurrent writers of a new file id do not collide."""
        values = {attr.columns[0].name: getattr(row, attr.key) for attr in inspect(FileRow).column_attrs}
        updated = [name for name in values if name != "id"]
        table = FileRow.__table__

        dialect = self.engine.dialect.name
        if dialect in ("mysql", "mariadb"):
            statement = mysql.insert(table).values(values)
            return statement.on_duplicate_key_update({name: statement.inserted[name] for name in updated})
        if dialect in ("sqlite", "postgresql"):
            insert = sqlite.insert if dialect == "sqlite" else postgresql.insert
            statement = insert(table).values(values)
            return statement.on_conflict_do_update(
                index_elements=[table.c.id],
                set_={name: statement.excluded[name] for name in updated},
            )
        raise NotImplementedError(f"No upsert for SQL dialect {dialect}")
