"""Grafana data sources and the API calls that manage them."""

from __future__ import annotations

import re
from dataclasses import Field, dataclass, field, fields, replace
from typing import Any

from .transport import Transport

SENTRY_TYPE = "grafana-sentry-datasource"

_HEADER_NAME = re.compile(r"httpHeaderName([0-9]+)")

# Name parts whose JSON spelling is not a plain capitalisation.
_SPECIAL_PARTS = {"ca": "CA", "sigv4": "SigV4"}


def _json(key: str, default: Any, omitempty: bool = True) -> Any:
    return field(default=default, metadata={"json": key, "omitempty": omitempty})


def _json_list(key: str) -> Any:
    return field(default_factory=list, metadata={"json": key, "omitempty": True})


def _camel_field(default: Any = "") -> Any:
    """An omitempty field whose JSON key is the camel-case form of its name."""
    return field(default=default, metadata={"camel": True, "omitempty": True})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    head = _SPECIAL_PARTS.get(head, head)
    head = head[0].lower() + head[1:]
    return head + "".join(_SPECIAL_PARTS.get(part, part.capitalize()) for part in rest)


def _key(f: Field) -> str | None:
    if "json" in f.metadata:
        return f.metadata["json"]
    if f.metadata.get("camel"):
        return _camel(f.name)
    return None


def _dump(obj: Any) -> dict[str, Any]:
    """Serialize the JSON-mapped fields, dropping empty ones marked omitempty."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        key = _key(f)
        if key is None:
            continue
        value = getattr(obj, f.name)
        if f.metadata["omitempty"] and not value:
            continue
        result[key] = value
    return result


def _load_kwargs(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Pick the JSON-mapped fields present in data as constructor arguments."""
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = _key(f)
        if key is not None and data.get(key) is not None:
            kwargs[f.name] = data[key]
    return kwargs


@dataclass
class LokiDerivedField:
    name: str = _json("name", "", omitempty=False)
    matcher_regex: str = _json("matcherRegex", "", omitempty=False)
    url: str = _json("url", "", omitempty=False)
    datasource_uid: str = _json("datasourceUid", "")

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LokiDerivedField:
        return cls(**_load_kwargs(cls, data))


@dataclass
class JSONData:
    """The `jsonData` property of a data source."""

    # Used by all data sources
    tls_auth: bool = _json("tlsAuth", False)
    tls_auth_with_ca_cert: bool = _json("tlsAuthWithCACert", False)
    tls_configuration_method: str = _json("tlsConfigurationMethod", "")
    tls_skip_verify: bool = _json("tlsSkipVerify", False)
    http_header_names: list[str] = field(default_factory=list)

    # Athena
    catalog: str = _json("catalog", "")
    database: str = _json("database", "")
    output_location: str = _json("outputLocation", "")
    workgroup: str = _json("workgroup", "")

    # GitHub
    github_url: str = _json("githubUrl", "")

    # Graphite
    graphite_version: str = _json("graphiteVersion", "")

    # Prometheus, Elasticsearch, InfluxDB, MySQL, PostgreSQL and MSSQL
    time_interval: str = _json("timeInterval", "")

    # Elasticsearch
    es_version: str = _json("esVersion", "")
    time_field: str = _json("timeField", "")
    interval: str = _json("interval", "")
    log_message_field: str = _json("logMessageField", "")
    log_level_field: str = _json("logLevelField", "")
    max_concurrent_shard_requests: int = _json("maxConcurrentShardRequests", 0)
    xpack_enabled: bool = _json("xpack", False, omitempty=False)

    # CloudWatch
    custom_metrics_namespaces: str = _json("customMetricsNamespaces", "")
    tracing_datasource_uid: str = _json("tracingDatasourceUid", "")

    # CloudWatch, Athena
    auth_type: str = _json("authType", "")
    assume_role_arn: str = _json("assumeRoleArn", "")
    default_region: str = _json("defaultRegion", "")
    endpoint: str = _json("endpoint", "")
    external_id: str = _json("externalId", "")
    profile: str = _json("profile", "")

    # Loki
    derived_fields: list[LokiDerivedField] = _json_list("derivedFields")
    max_lines: int = _json("maxLines", 0)

    # OpenTSDB
    tsdb_version: int = _json("tsdbVersion", 0)
    tsdb_resolution: int = _json("tsdbResolution", 0)

    # MSSQL
    encrypt: str = _json("encrypt", "")

    # PostgreSQL
    sslmode: str = _json("sslmode", "")
    postgres_version: int = _json("postgresVersion", 0)
    timescaledb: bool = _json("timescaledb", False, omitempty=False)

    # MySQL, PostgreSQL and MSSQL
    max_open_conns: int = _json("maxOpenConns", 0)
    max_idle_conns: int = _json("maxIdleConns", 0)
    conn_max_lifetime: int = _json("connMaxLifetime", 0)

    # Prometheus
    http_method: str = _json("httpMethod", "")
    query_timeout: str = _json("queryTimeout", "")

    # Stackdriver
    authentication_type: str = _json("authenticationType", "")
    client_email: str = _json("clientEmail", "")
    default_project: str = _json("defaultProject", "")
    token_uri: str = _json("tokenUri", "")

    # Prometheus and Elasticsearch
    sigv4_assume_role_arn: str = _json("sigV4AssumeRoleArn", "")
    sigv4_auth: bool = _json("sigV4Auth", False, omitempty=False)
    sigv4_auth_type: str = _json("sigV4AuthType", "")
    sigv4_external_id: str = _json("sigV4ExternalID", "")
    sigv4_profile: str = _json("sigV4Profile", "")
    sigv4_region: str = _json("sigV4Region", "")

    # Prometheus and Loki
    manage_alerts: bool = _json("manageAlerts", False, omitempty=False)
    alertmanager_uid: str = _json("alertmanagerUid", "")

    # Alertmanager
    implementation: str = _json("implementation", "")

    # Sentry, which reads the URL from here rather than from the data source
    org_slug: str = _json("orgSlug", "")
    url: str = _json("url", "")

    # InfluxDB
    default_bucket: str = _json("defaultBucket", "")
    organization: str = _json("organization", "")
    version: str = _json("version", "")

    # Azure Monitor
    azure_log_analytics_same_as: bool = _json("azureLogAnalyticsSameAs", False, omitempty=False)
    client_id: str = _json("clientId", "")
    cloud_name: str = _json("cloudName", "")
    log_analytics_client_id: str = _json("logAnalyticsClientId", "")
    log_analytics_default_workspace: str = _json("logAnalyticsDefaultWorkspace", "")
    log_analytics_tenant_id: str = _json("logAnalyticsTenantId", "")
    subscription_id: str = _json("subscriptionId", "")
    tenant_id: str = _json("tenantId", "")

    def to_dict(self) -> dict[str, Any]:
        result = _dump(self)
        if self.derived_fields:
            result["derivedFields"] = [d.to_dict() for d in self.derived_fields]
        for index, name in enumerate(self.http_header_names, start=1):
            result[f"httpHeaderName{index}"] = name
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JSONData:
        kwargs = _load_kwargs(cls, data)
        if "derived_fields" in kwargs:
            kwargs["derived_fields"] = [
                LokiDerivedField.from_dict(item) for item in kwargs["derived_fields"]
            ]
        headers = {
            int(match.group(1)): value
            for key, value in data.items()
            if (match := _HEADER_NAME.fullmatch(key))
        }
        names: list[str] = [""] * len(headers)
        for index, value in headers.items():
            if not 1 <= index <= len(names):
                raise ValueError(f"httpHeaderName{index} is out of sequence")
            if not isinstance(value, str):
                raise TypeError(f"httpHeaderName{index} must be a string")
            names[index - 1] = value
        kwargs["http_header_names"] = names
        return cls(**kwargs)


@dataclass
class SecureJSONData:
    """The `secureJsonData` property of a data source."""

    # Used by all data sources
    tls_ca_cert: str = _camel_field()
    tls_client_cert: str = _camel_field()
    tls_client_key: str = _camel_field()
    password: str = _camel_field()
    basic_auth_password: str = _camel_field()
    http_header_values: list[str] = field(default_factory=list)

    # CloudWatch, Athena
    access_key: str = _camel_field()
    secret_key: str = _camel_field()

    # Stackdriver
    private_key: str = _camel_field()

    # Prometheus and Elasticsearch
    sigv4_access_key: str = _camel_field()
    sigv4_secret_key: str = _camel_field()

    # GitHub
    access_token: str = _camel_field()

    # Sentry
    auth_token: str = _camel_field()

    # Azure Monitor
    client_secret: str = _camel_field()

    def to_dict(self) -> dict[str, Any]:
        result = _dump(self)
        for index, value in enumerate(self.http_header_values, start=1):
            result[f"httpHeaderValue{index}"] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SecureJSONData:
        return cls(**_load_kwargs(cls, data))


@dataclass
class DataSource:
    """A Grafana data source."""

    id: int = _json("id", 0)
    uid: str = _json("uid", "")
    name: str = _json("name", "", omitempty=False)
    type: str = _json("type", "", omitempty=False)
    url: str = _json("url", "", omitempty=False)
    access: str = _json("access", "", omitempty=False)
    # Only returned by the API; set through provisioning.
    read_only: bool = _json("readOnly", False, omitempty=False)
    database: str = _json("database", "")
    user: str = _json("user", "")
    # Deprecated: use secure_json_data.password.
    password: str = _camel_field()
    org_id: int = _json("orgId", 0)
    is_default: bool = _json("isDefault", False, omitempty=False)
    basic_auth: bool = _json("basicAuth", False, omitempty=False)
    basic_auth_user: str = _json("basicAuthUser", "")
    # Deprecated: use secure_json_data.basic_auth_password.
    basic_auth_password: str = _camel_field()
    http_headers: dict[str, str] = field(default_factory=dict)
    json_data: JSONData = field(default_factory=JSONData)
    secure_json_data: SecureJSONData = field(default_factory=SecureJSONData)

    def to_dict(self) -> dict[str, Any]:
        json_data = replace(
            self.json_data,
            http_header_names=[*self.json_data.http_header_names, *self.http_headers.keys()],
        )
        secure_json_data = replace(
            self.secure_json_data,
            http_header_values=[
                *self.secure_json_data.http_header_values,
                *self.http_headers.values(),
            ],
        )
        if self.type == SENTRY_TYPE:
            json_data = replace(json_data, url=self.url)
        result = _dump(self)
        result["jsonData"] = json_data.to_dict()
        result["secureJsonData"] = secure_json_data.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataSource:
        kwargs = _load_kwargs(cls, data)
        json_data = JSONData.from_dict(data.get("jsonData") or {})
        secure_json_data = SecureJSONData.from_dict(data.get("secureJsonData") or {})
        # Header values are never returned by the API.
        headers = {name: "true" for name in json_data.http_header_names}
        return cls(
            **kwargs,
            http_headers=headers,
            json_data=json_data,
            secure_json_data=secure_json_data,
        )


class DataSourceAPI:
    """Data source endpoints; expects a Transport in `_transport`."""

    _transport: Transport

    def new_data_source(self, data_source: DataSource) -> int:
        """Create a data source and return its ID."""
        result = self._transport.request("POST", "/api/datasources", body=data_source.to_dict())
        return (result or {}).get("id", 0)

    def update_data_source(self, data_source: DataSource) -> None:
        self._transport.request(
            "PUT", f"/api/datasources/{data_source.id}", body=data_source.to_dict()
        )

    def data_source(self, data_source_id: int) -> DataSource:
        result = self._transport.request("GET", f"/api/datasources/{data_source_id}")
        return DataSource.from_dict(result or {})

    def data_source_by_uid(self, uid: str) -> DataSource:
        result = self._transport.request("GET", f"/api/datasources/uid/{uid}")
        return DataSource.from_dict(result or {})

    def data_source_id_by_name(self, name: str) -> int:
        result = self._transport.request("GET", f"/api/datasources/name/{name}")
        return (result or {}).get("id", 0)

    def data_sources(self) -> list[DataSource]:
        result = self._transport.request("GET", "/api/datasources")
        return [DataSource.from_dict(item) for item in result or []]

    def delete_data_source(self, data_source_id: int) -> None:
        self._transport.request("DELETE", f"/api/datasources/{data_source_id}")