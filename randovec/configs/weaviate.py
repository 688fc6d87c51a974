"""
Weaviate connection settings.

Endpoint and credential configuration for the remote Weaviate instance.
The endpoint variable names keep the historical ENDPONT spelling so that
existing deployments keep working.

Dependencies: pydantic, pydantic_settings
System role: Remote vector store connection configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TLS_PORT = 443
DEFAULT_PLAIN_PORT = 80


def split_endpoint(endpoint: str, default_port: int) -> tuple[str, int]:
    """
    Split a ``host[:port]`` endpoint into host and port.

    A leading scheme (``https://``) is tolerated and dropped.

    Args:
        endpoint: Endpoint string from the environment
        default_port: Port used when the endpoint carries none

    Returns:
        tuple[str, int]: Host and port

    Raises:
        ValueError: When the port is not an integer
    """
    value = endpoint.strip()
    if "://" in value:
        value = value.split("://", 1)[1]
    value = value.rstrip("/")

    host, sep, port = value.rpartition(":")
    if not sep:
        return value, default_port
    if not port.isdigit():
        raise ValueError(f"Invalid port in endpoint: {endpoint!r}")
    return host, int(port)


class WeaviateSettings(BaseSettings):
    """Connection configuration for the Weaviate instance."""

    model_config = SettingsConfigDict(
        env_prefix="WEAVIATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    http_endpoint: str = Field(
        ...,
        min_length=1,
        validation_alias="WEAVIATE_HTTP_ENDPONT",
        description="HTTP host:port of the Weaviate instance",
    )
    grpc_endpoint: str = Field(
        ...,
        min_length=1,
        validation_alias="WEAVIATE_GRPC_ENDPONT",
        description="gRPC host:port of the Weaviate instance",
    )
    api_key: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="API key used as bearer credential",
    )

    secure: bool = Field(default=True, description="Use https and TLS gRPC")
    skip_init_checks: bool = Field(
        default=False,
        description="Skip readiness and version checks on connect",
    )

    timeout_init: int = Field(default=30, gt=0, description="Connect timeout (seconds)")
    timeout_query: int = Field(default=60, gt=0, description="Query timeout (seconds)")
    timeout_insert: int = Field(default=120, gt=0, description="Insert timeout (seconds)")

    @field_validator("http_endpoint", "grpc_endpoint")
    @classmethod
    def _check_endpoint(cls, value: str) -> str:
        host, _ = split_endpoint(value, DEFAULT_TLS_PORT)
        if not host:
            raise ValueError(f"Missing host in endpoint: {value!r}")
        return value

    @property
    def _default_port(self) -> int:
        return DEFAULT_TLS_PORT if self.secure else DEFAULT_PLAIN_PORT

    @property
    def http_address(self) -> tuple[str, int]:
        """HTTP host and port."""
        return split_endpoint(self.http_endpoint, self._default_port)

    @property
    def grpc_address(self) -> tuple[str, int]:
        """gRPC host and port."""
        return split_endpoint(self.grpc_endpoint, self._default_port)
