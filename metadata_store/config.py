import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from sqlalchemy.engine import URL, make_url


class MetadataBackendConfig(BaseModel):
    host: str = Field("localhost", description="Database server host")
    port: int = Field(3306, description="Database server port")
    username: str = Field("plik", description="Database user")
    password: str = Field("plik", description="Database password")
    database: str = Field("plik", description="Database name")
    driver: str = Field("mysql+pymysql", description="SQLAlchemy dialect and driver")
    url: Optional[str] = Field(None, description="Full SQLAlchemy URL, overrides the fields above")
    debug: bool = Field(False, description="Echo every SQL statement")

    @classmethod
    def from_env(cls) -> "MetadataBackendConfig":
        load_dotenv()

        values = {
            "host": os.getenv("METADATA_DB_HOST"),
            "port": os.getenv("METADATA_DB_PORT"),
            "username": os.getenv("METADATA_DB_USER"),
            "password": os.getenv("METADATA_DB_PASSWORD"),
            "database": os.getenv("METADATA_DB_NAME"),
            "driver": os.getenv("METADATA_DB_DRIVER"),
            "url": os.getenv("METADATA_DB_URL"),
        }
        values = {k: v for k, v in values.items() if v}
        values["debug"] = os.getenv("LOG_LEVEL", "").upper() == "DEBUG"
        return cls(**values)

    def dsn(self) -> URL:
        if self.url:
            return make_url(self.url)
        return URL.create(
            self.driver,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def safe_dsn(self) -> str:
        return self.dsn().render_as_string(hide_password=True)
