"""Client configuration: defaults, environment overrides and validation."""

from __future__ import annotations

import json
import logging
import os
import platform
import re
from dataclasses import dataclass, fields, replace
from enum import Enum

SDK_VERSION = "0.8.0"

_SDK_PACKAGE_NAME = "arize"
_ALLOWED_HTTP_SCHEMES = frozenset({"http", "https"})

_DEFAULT_API_HOST = "api.arize.com"
_DEFAULT_API_SCHEME = "https"
_DEFAULT_OTLP_HOST = "otlp.arize.com"
_DEFAULT_OTLP_SCHEME = "https"
_DEFAULT_FLIGHT_HOST = "flight.arize.com"
_DEFAULT_FLIGHT_PORT = 443
_DEFAULT_FLIGHT_SCHEME = "grpc+tls"
_DEFAULT_HTTP_TIMEOUT = 30.0
_DEFAULT_MAX_HTTP_PAYLOAD_SIZE_MB = 8.0
_DEFAULT_ARIZE_DIRECTORY = "~/.arize"
_DEFAULT_MAX_PAST_YEARS = 5

_CREDENTIAL_ENV_NAME = "ARIZE_API_KEY"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value is missing, malformed or invalid."""


class MissingAPIKeyError(ConfigError):
    """Raised when no API key is configured."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "api_key is required; set Config.api_key or ARIZE_API_KEY env var"
        )


class MultipleEndpointOverridesError(ConfigError):
    """Raised when more than one endpoint override is set."""


class Region(str, Enum):
    """Known deployment regions."""

    US_CENTRAL = "us-central-1a"
    EU_WEST = "eu-west-1a"
    CA_CENTRAL = "ca-central-1a"
    US_EAST = "us-east-1b"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RegionEndpoints:
    """Default endpoints of one region."""

    api_host: str
    otlp_host: str
    flight_host: str
    flight_port: int


def _region_endpoints(region: str) -> RegionEndpoints:
    return RegionEndpoints(
        api_host=f"api.{region}.arize.com",
        otlp_host=f"otlp.{region}.arize.com",
        flight_host=f"flight.{region}.arize.com",
        flight_port=_DEFAULT_FLIGHT_PORT,
    )


_DEFAULT_REGION_ENDPOINTS: dict[str, RegionEndpoints] = {
    r.value: _region_endpoints(r.value) for r in Region
}


def is_valid_region(region: str) -> bool:
    """Report whether ``region`` is one of the known regions."""
    return isinstance(region, str) and str(region) in _DEFAULT_REGION_ENDPOINTS


def region_endpoints_for(region: str) -> RegionEndpoints | None:
    """Return the default endpoints for ``region``, or None if it is unknown."""
    if not isinstance(region, str):
        return None
    return _DEFAULT_REGION_ENDPOINTS.get(str(region))


def mask_secret(secret: str) -> str:
    """Keep the first six characters of a secret and mask the rest."""
    if not secret:
        return ""
    if len(secret) <= 6:
        return "***"
    return secret[:6] + "***"


def _quote(value: object) -> str:
    return json.dumps(str(value), ensure_ascii=False)


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _env_raw(name: str) -> str:
    return os.environ.get(name, "")


def _parse_bool_env(name: str) -> bool | None:
    raw = _env_raw(name).strip()
    if not raw:
        return None
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_str(name: str, default: str) -> str:
    return _env_raw(name).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = _env_raw(name)
    if raw == "":
        return default
    if not _INT_PATTERN.fullmatch(raw):
        raise ConfigError(f"{name} is not a valid integer: {_quote(raw)}")
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = _env_raw(name)
    if raw == "":
        return default
    try:
        if raw != raw.strip() or "_" in raw:
            raise ValueError(raw)
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} is not a valid float: {_quote(raw)}") from None


@dataclass(frozen=True)
class Config:
    """All settings of the client.

    ``region``, ``single_host``/``single_port`` and ``base_domain`` are mutually
    exclusive endpoint overrides; when set, :meth:`resolve` rewrites the hosts
    (and flight port) from them. ``http_timeout`` is in seconds.
    """

    api_key: str = ""
    api_host: str = ""
    api_scheme: str = ""

    otlp_host: str = ""
    otlp_scheme: str = ""

    flight_host: str = ""
    flight_port: int = 0
    flight_scheme: str = ""

    region: str = ""
    single_host: str = ""
    single_port: int = 0
    base_domain: str = ""

    insecure_skip_verify: bool = False
    http_timeout: float = 0.0
    max_http_payload_size_mb: float = 0.0
    arize_directory: str = ""
    disable_caching: bool = False
    max_past_years: int = 0

    def resolve(self) -> Config:
        """Return a copy with environment values and defaults filled in and
        endpoint overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}

        if not values["api_key"]:
            values["api_key"] = _env_raw(_CREDENTIAL_ENV_NAME)
        if not values["api_host"]:
            values["api_host"] = _env_str("ARIZE_API_HOST", _DEFAULT_API_HOST)
        if not values["api_scheme"]:
            values["api_scheme"] = _env_str("ARIZE_API_SCHEME", _DEFAULT_API_SCHEME)
        if not values["otlp_host"]:
            values["otlp_host"] = _env_str("ARIZE_OTLP_HOST", _DEFAULT_OTLP_HOST)
        if not values["otlp_scheme"]:
            values["otlp_scheme"] = _env_str("ARIZE_OTLP_SCHEME", _DEFAULT_OTLP_SCHEME)
        if not values["flight_host"]:
            values["flight_host"] = _env_str("ARIZE_FLIGHT_HOST", _DEFAULT_FLIGHT_HOST)
        if values["flight_port"] == 0:
            values["flight_port"] = _env_int("ARIZE_FLIGHT_PORT", _DEFAULT_FLIGHT_PORT)
        if not values["flight_scheme"]:
            values["flight_scheme"] = _env_str(
                "ARIZE_FLIGHT_SCHEME", _DEFAULT_FLIGHT_SCHEME
            )
        if not values["region"]:
            values["region"] = _env_raw("ARIZE_REGION")
        if not values["single_host"]:
            values["single_host"] = _env_raw("ARIZE_SINGLE_HOST")
        if values["single_port"] == 0:
            values["single_port"] = _env_int("ARIZE_SINGLE_PORT", 0)
        if not values["base_domain"]:
            values["base_domain"] = _env_raw("ARIZE_BASE_DOMAIN")
        # The env flag means "verify TLS"; the field is named for the negative.
        if not values["insecure_skip_verify"]:
            verify = _parse_bool_env("ARIZE_REQUEST_VERIFY")
            if verify is not None:
                values["insecure_skip_verify"] = not verify
        if values["http_timeout"] == 0:
            values["http_timeout"] = _DEFAULT_HTTP_TIMEOUT
        if values["max_http_payload_size_mb"] == 0:
            values["max_http_payload_size_mb"] = _env_float(
                "ARIZE_MAX_HTTP_PAYLOAD_SIZE_MB", _DEFAULT_MAX_HTTP_PAYLOAD_SIZE_MB
            )
        if not values["arize_directory"]:
            values["arize_directory"] = _env_str(
                "ARIZE_DIRECTORY", _DEFAULT_ARIZE_DIRECTORY
            )
        # The env flag means "caching on"; the field is named for the negative.
        if not values["disable_caching"]:
            enable = _parse_bool_env("ARIZE_ENABLE_CACHING")
            if enable is not None:
                values["disable_caching"] = not enable
        if values["max_past_years"] == 0:
            values["max_past_years"] = _env_int(
                "ARIZE_MAX_PAST_YEARS", _DEFAULT_MAX_PAST_YEARS
            )
        if values["max_past_years"] != _DEFAULT_MAX_PAST_YEARS:
            _log.warning(
                "max_past_years is set to %d (default: %d). This setting allows "
                "timestamps older than the default limit. Please contact Arize "
                "support to enable custom timestamp limits for your account.",
                values["max_past_years"],
                _DEFAULT_MAX_PAST_YEARS,
            )

        # Later overrides win when several are set; validate() rejects that.
        if values["base_domain"]:
            domain = values["base_domain"]
            values["api_host"] = f"api.{domain}"
            values["otlp_host"] = f"otlp.{domain}"
            values["flight_host"] = f"flight.{domain}"
        if values["single_host"]:
            host = values["single_host"]
            values["api_host"] = host
            values["otlp_host"] = host
            values["flight_host"] = host
        if values["single_port"] != 0:
            values["flight_port"] = values["single_port"]
        if values["region"]:
            endpoints = region_endpoints_for(values["region"])
            if endpoints is not None:
                values["api_host"] = endpoints.api_host
                values["otlp_host"] = endpoints.otlp_host
                values["flight_host"] = endpoints.flight_host
                values["flight_port"] = endpoints.flight_port

        return replace(self, **values)

    def validate(self) -> None:
        """Raise :class:`ConfigError` if this (resolved) configuration is invalid."""
        if not self.api_key:
            raise MissingAPIKeyError()

        overrides = sum(
            (
                bool(self.region),
                bool(self.single_host or self.single_port != 0),
                bool(self.base_domain),
            )
        )
        if overrides > 1:
            conflicts = []
            if self.region:
                conflicts.append(f"region={_quote(self.region)}")
            if self.single_host:
                conflicts.append(f"single_host={_quote(self.single_host)}")
            if self.single_port != 0:
                conflicts.append(f"single_port={self.single_port}")
            if self.base_domain:
                conflicts.append(f"base_domain={_quote(self.base_domain)}")
            raise MultipleEndpointOverridesError(
                "only one of region, single_host, or base_domain may be set: got "
                + ", ".join(conflicts)
            )
        if self.single_port != 0 and not 1 <= self.single_port <= 65535:
            raise ConfigError(f"single_port must be 1-65535, got {self.single_port}")
        if not 1 <= self.flight_port <= 65535:
            raise ConfigError(f"flight_port must be 1-65535, got {self.flight_port}")
        if self.api_scheme.lower() not in _ALLOWED_HTTP_SCHEMES:
            raise ConfigError(
                f"api_scheme must be one of [http https], got {_quote(self.api_scheme)}"
            )
        if self.otlp_scheme.lower() not in _ALLOWED_HTTP_SCHEMES:
            raise ConfigError(
                "otlp_scheme must be one of [http https], got "
                f"{_quote(self.otlp_scheme)}"
            )
        if self.region and not is_valid_region(self.region):
            raise ConfigError(f"region {_quote(self.region)} is not a known region")
        if self.max_http_payload_size_mb < 1:
            raise ConfigError(
                "max_http_payload_size_mb must be >= 1, got "
                f"{_format_number(self.max_http_payload_size_mb)}"
            )
        if self.max_past_years < 1:
            raise ConfigError(
                f"max_past_years must be >= 1, got {self.max_past_years}"
            )

    def api_url(self) -> str:
        """Base URL for REST calls."""
        return f"{self.api_scheme}://{self.api_host}"

    def headers(self) -> dict[str, str]:
        """Headers sent with every request; the key goes without a Bearer prefix."""
        return {
            "authorization": self.api_key,
            "sdk-language": "python",
            "language-version": platform.python_version(),
            "sdk-version": SDK_VERSION,
            "sdk-package-name": _SDK_PACKAGE_NAME,
        }

    def __str__(self) -> str:
        return (
            f"Config(api_key={mask_secret(self.api_key)}, "
            f"api_host={_quote(self.api_host)}, api_scheme={_quote(self.api_scheme)}, "
            f"otlp_host={_quote(self.otlp_host)}, "
            f"otlp_scheme={_quote(self.otlp_scheme)}, "
            f"flight_host={_quote(self.flight_host)}, flight_port={self.flight_port}, "
            f"flight_scheme={_quote(self.flight_scheme)}, "
            f"region={_quote(self.region)}, single_host={_quote(self.single_host)}, "
            f"single_port={self.single_port}, base_domain={_quote(self.base_domain)}, "
            f"insecure_skip_verify={self.insecure_skip_verify}, "
            f"http_timeout={_format_number(self.http_timeout)}s, "
            f"max_http_payload_size_mb={_format_number(self.max_http_payload_size_mb)}, "
            f"arize_directory={_quote(self.arize_directory)}, "
            f"disable_caching={self.disable_caching}, "
            f"max_past_years={self.max_past_years})"
        )

    __repr__ = __str__