"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://appassets02.shiftcare.com/manual"
DEFAULT_ENDPOINT = "/clients.json"


class OutputFormat(str, Enum):
    """Result rendering formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SourceConfig(BaseModel):
    """Where client records are fetched from."""

    base_url: str = Field(DEFAULT_API_URL, min_length=1, description="Base URL of the clients API")
    endpoint: str = Field(DEFAULT_ENDPOINT, min_length=1, description="Path of the clients resource")
    file: Optional[str] = Field(
        None, description="Local JSON file to read instead of the API"
    )
    timeout: int = Field(30, ge=5, le=300, description="HTTP request timeout (seconds)")
    user_agent: str = Field(
        "ClientSearch/1.0", min_length=1, description="User-Agent string for HTTP requests"
    )
    max_records: int = Field(
        0, ge=0, description="Maximum records to load per fetch (0 = unlimited)"
    )

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        """Strip whitespace and trailing slashes from the base URL."""
        stripped = v.strip().rstrip("/")
        if not stripped:
            raise ValueError("base_url cannot be empty")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got: {stripped}")
        return stripped

    @field_validator("endpoint")
    @classmethod
    def normalize_endpoint(cls, v: str) -> str:
        """Ensure the endpoint starts with a single slash."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("endpoint cannot be empty")
        return "/" + stripped.lstrip("/")

    @field_validator("file")
    @classmethod
    def strip_file(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank file path as unset."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None

    @field_validator("user_agent")
    @classmethod
    def strip_user_agent(cls, v: str) -> str:
        """Strip whitespace from user agent."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("user_agent cannot be empty")
        return stripped

    @property
    def url(self) -> str:
        """Full URL of the clients resource."""
        return f"{self.base_url}{self.endpoint}"


class SearchConfig(BaseModel):
    """Defaults applied to searches when the caller does not override them."""

    default_field: str = Field("full_name", description="Field searched when none is given")
    default_format: OutputFormat = Field(OutputFormat.TABLE, description="Output format")
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of results")

    @field_validator("default_field")
    @classmethod
    def normalize_default_field(cls, v: str) -> str:
        stripped = v.strip()
        return stripped or "full_name"

    model_config = {"use_enum_values": True, "validate_default": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class ServerConfig(BaseModel):
    """Settings for the HTTP query API."""

    host: str = Field("127.0.0.1", min_length=1, description="Interface to bind")
    port: int = Field(4567, ge=1, le=65535, description="Port to listen on")


class AppConfig(BaseModel):
    """Root configuration object for Client Search."""

    source: SourceConfig = Field(default_factory=SourceConfig, description="Record source")
    search: SearchConfig = Field(default_factory=SearchConfig, description="Search defaults")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    server: ServerConfig = Field(default_factory=ServerConfig, description="API server settings")
