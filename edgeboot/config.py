"""Configuration structures shared by services during bootstrap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "API_PING_ROUTE",
    "COMMON_CONFIG_DONE",
    "DEFAULT_BASE_TOPIC",
    "DEFAULT_HTTP_PROTOCOL",
    "DEFAULT_SECRET_STORE",
    "SERVICE_TYPE_APP",
    "SERVICE_TYPE_DEVICE",
    "SERVICE_TYPE_OTHER",
    "AuthenticationInfo",
    "BootstrapConfiguration",
    "CORSConfigurationInfo",
    "CertKeyPair",
    "ClientInfo",
    "ClientsCollection",
    "ConfigProviderInfo",
    "Credentials",
    "Database",
    "ExternalMQTTInfo",
    "InsecureSecrets",
    "InsecureSecretsInfo",
    "MessageBusInfo",
    "RegistryInfo",
    "RuntimeTokenProviderInfo",
    "SecretStoreInfo",
    "ServiceInfo",
    "TelemetryInfo",
    "new_secret_store_info",
]

DEFAULT_HTTP_PROTOCOL = "http"

SERVICE_TYPE_APP = "app-service"
SERVICE_TYPE_DEVICE = "device-service"
SERVICE_TYPE_OTHER = "other"

COMMON_CONFIG_DONE = "IsCommonConfigReady"

API_PING_ROUTE = "/api/v3/ping"
DEFAULT_BASE_TOPIC = "edgex"
DEFAULT_SECRET_STORE = "openbao"


def _url(protocol: str, host: str, port: int) -> str:
    return f"{protocol}://{host}:{port}"


@dataclass
class CORSConfigurationInfo:
    """Cross-origin resource sharing settings for a service."""

    enable_cors: bool = False
    cors_allow_credentials: bool = False
    cors_allowed_origin: str = ""
    cors_allowed_methods: str = ""
    cors_allowed_headers: str = ""
    cors_expose_headers: str = ""
    cors_max_age: int = 0


@dataclass
class ServiceInfo:
    """Settings needed for the basic operation of any service."""

    health_check_interval: str = ""
    host: str = ""
    port: int = 0
    server_bind_addr: str = ""
    startup_msg: str = ""
    max_result_count: int = 0
    max_request_size: int = 0
    request_timeout: str = ""
    enable_name_field_escape: bool = False
    cors_configuration: CORSConfigurationInfo = field(default_factory=CORSConfigurationInfo)
    security_options: dict[str, str] = field(default_factory=dict)

    def health_check(self) -> str:
        """URL of the ping endpoint the registry uses to check the service."""
        return _url("http", self.host, self.port) + API_PING_ROUTE

    def url(self) -> str:
        """Full base URL of the service."""
        return _url(DEFAULT_HTTP_PROTOCOL, self.host, self.port)


@dataclass
class ConfigProviderInfo:
    """Type and location of the configuration provider."""

    host: str = ""
    port: int = 0
    type: str = ""


@dataclass
class RegistryInfo:
    """Type and location of the service registry."""

    host: str = ""
    port: int = 0
    type: str = ""


@dataclass
class ClientInfo:
    """Location of another service in the ecosystem."""

    host: str = ""
    port: int = 0
    protocol: str = ""
    use_message_bus: bool = False
    security_options: dict[str, str] = field(default_factory=dict)

    def url(self) -> str:
        """Base URL of the client's service."""
        return _url(self.protocol, self.host, self.port)


ClientsCollection = dict[str, ClientInfo]


@dataclass
class AuthenticationInfo:
    """How a service authenticates with the secret store."""

    auth_type: str = ""
    auth_token: str = ""


@dataclass
class RuntimeTokenProviderInfo:
    """Settings for obtaining a secret store token at runtime."""

    enabled: bool = False
    protocol: str = ""
    host: str = ""
    port: int = 0
    trust_domain: str = ""
    endpoint_socket: str = ""
    required_secrets: str = ""


@dataclass
class SecretStoreInfo:
    """Properties used to create a secret store client."""

    type: str = ""
    host: str = ""
    port: int = 0
    store_name: str = ""
    protocol: str = ""
    namespace: str = ""
    root_ca_cert_path: str = ""
    server_name: str = ""
    authentication: AuthenticationInfo = field(default_factory=AuthenticationInfo)
    token_file: str = ""
    secrets_file: str = ""
    disable_scrub_secrets_file: bool = False
    runtime_token_provider: RuntimeTokenProviderInfo = field(
        default_factory=RuntimeTokenProviderInfo
    )


def new_secret_store_info(service_key: str) -> SecretStoreInfo:
    """Return the default secret store settings for a service."""
    return SecretStoreInfo(
        type=DEFAULT_SECRET_STORE,
        protocol="http",
        host="localhost",
        port=8200,
        store_name=service_key,
        token_file=f"/tmp/edgex/secrets/{service_key}/secrets-token.json",
        disable_scrub_secrets_file=False,
        namespace="",
        root_ca_cert_path="",
        server_name="",
        secrets_file="",
        authentication=AuthenticationInfo(auth_type="X-Vault-Token", auth_token=""),
        runtime_token_provider=RuntimeTokenProviderInfo(
            enabled=False,
            protocol="https",
            host="localhost",
            port=59841,
            trust_domain="edgexfoundry.org",
            endpoint_socket="/tmp/edgex/secrets/spiffe/public/api.sock",
            required_secrets="redisdb",
        ),
    )


@dataclass
class Database:
    """Location and type of a database."""

    type: str = ""
    timeout: str = ""
    host: str = ""
    port: int = 0
    name: str = ""


@dataclass
class Credentials:
    """A username and password pair."""

    username: str = ""
    password: str = ""


@dataclass
class CertKeyPair:
    """A public certificate and its private key."""

    cert: str = ""
    key: str = ""


@dataclass
class InsecureSecretsInfo:
    """Secrets held directly in configuration."""

    secret_name: str = ""
    secret_data: dict[str, str] = field(default_factory=dict)


InsecureSecrets = dict[str, InsecureSecretsInfo]


@dataclass
class MessageBusInfo:
    """Parameters for connecting to the message bus."""

    disabled: bool = False
    type: str = ""
    protocol: str = ""
    host: str = ""
    port: int = 0
    auth_mode: str = ""
    secret_name: str = ""
    base_topic_prefix: str = ""
    optional: dict[str, str] = field(default_factory=dict)

    def get_base_topic_prefix(self) -> str:
        """The configured base topic prefix, or the default when unset."""
        return self.base_topic_prefix or DEFAULT_BASE_TOPIC

    def url(self) -> str:
        """URL built from protocol, host and port."""
        return _url(self.protocol, self.host, self.port)


@dataclass
class ExternalMQTTInfo:
    """Settings for connecting to an external MQTT broker."""

    url: str = ""
    subscribe_topics: str = ""
    publish_topic: str = ""
    topics: dict[str, str] = field(default_factory=dict)
    client_id: str = ""
    connect_timeout: str = ""
    auto_reconnect: bool = False
    keep_alive: int = 0
    qos: int = 0
    retain: bool = False
    skip_cert_verify: bool = False
    secret_name: str = ""
    auth_mode: str = ""
    retry_duration: int = 0
    retry_interval: int = 0
    enabled: bool = False


@dataclass
class BootstrapConfiguration:
    """The configuration elements required by bootstrap."""

    clients: Optional[ClientsCollection] = None
    service: Optional[ServiceInfo] = None
    config: Optional[ConfigProviderInfo] = None
    registry: Optional[RegistryInfo] = None
    message_bus: Optional[MessageBusInfo] = None
    database: Optional[Database] = None
    external_mqtt: Optional[ExternalMQTTInfo] = None


@dataclass
class TelemetryInfo:
    """Metrics collection settings for a service."""

    interval: str = ""
    metrics: dict[str, bool] = field(default_factory=dict)
    tags: dict[str, str] = field(default_factory=dict)

    def get_enabled_metric_name(self, metric_name: str) -> tuple[str, bool]:
        """Return the configured metric name that prefixes ``metric_name`` and whether it is enabled.

        Returns ``("", False)`` when no configured name matches.
        """
        for config_name, enabled in self.metrics.items():
            if metric_name.startswith(config_name):
                return config_name, enabled
        return "", False