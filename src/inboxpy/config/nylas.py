"""Nylas API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from inboxpy.domain.types import AccountModel

from .batch import BatchConfig, get_batch_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig

NYLAS_SERVERS: Final[dict[str, str]] = {
    "us": "https://api.nylas.com",
    "canada": "https://canada.api.nylas.com",
    "ireland": "https://ireland.api.nylas.com",
}
DEFAULT_REGION: Final[str] = "us"
NYLAS_TIMEOUT_SECONDS = 30.0


def server_for_region(region: str) -> str:
    try:
        return NYLAS_SERVERS[region]
    except KeyError:
        supported = ", ".join(sorted(NYLAS_SERVERS))
        raise ConfigurationError(
            f"Unsupported Nylas region {region!r} (expected one of: {supported})"
        ) from None


def parse_account_model(value: str) -> AccountModel:
    try:
        return AccountModel(value.strip().lower())
    except ValueError:
        supported = ", ".join(model.value for model in AccountModel)
        raise ConfigurationError(
            f"Unsupported account model {value!r} (expected one of: {supported})"
        ) from None


def _default_resilience(region: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="nylas",
        base_url=server_for_region(region),
        timeout_seconds=NYLAS_TIMEOUT_SECONDS,
        default_headers={"Accept": "application/json"},
    )


@dataclass(frozen=True)
class NylasConfig:
    """Holds Nylas API credentials and account behaviour."""

    api_token: str
    access_token: str = ""
    region: str = DEFAULT_REGION
    account_model: AccountModel = AccountModel.LABEL
    batch: BatchConfig = field(default_factory=BatchConfig)
    resilience: ResilienceConfig | None = None

    @property
    def server(self) -> str:
        if self.resilience is not None and self.resilience.base_url is not None:
            return self.resilience.base_url
        return server_for_region(self.region)

    def resolved_resilience(self) -> ResilienceConfig:
        return self.resilience or _default_resilience(self.region)

    def authorization_header(self) -> dict[str, str]:
        if not self.access_token:
            raise ConfigurationError("Missing Nylas access token for an authorised request")
        return {"Authorization": f"Bearer {self.access_token}"}


def get_nylas_config(*, resilience: ResilienceConfig | None = None) -> NylasConfig:
    values = require_env_vars(("NYLAS_API_TOKEN", "NYLAS_ACCESS_TOKEN"))
    region = optional_env_var("NYLAS_REGION", DEFAULT_REGION).lower()
    server_for_region(region)
    return NylasConfig(
        api_token=values["NYLAS_API_TOKEN"],
        access_token=values["NYLAS_ACCESS_TOKEN"],
        region=region,
        account_model=parse_account_model(optional_env_var("NYLAS_ACCOUNT_MODEL", "label")),
        batch=get_batch_config(),
        resilience=resilience,
    )


def get_nylas_auth_config(*, resilience: ResilienceConfig | None = None) -> NylasConfig:
    """Config for the hosted OAuth flow, where no access token exists yet."""

    values = require_env_vars(("NYLAS_API_TOKEN",))
    region = optional_env_var("NYLAS_REGION", DEFAULT_REGION).lower()
    server_for_region(region)
    return NylasConfig(
        api_token=values["NYLAS_API_TOKEN"],
        access_token=optional_env_var("NYLAS_ACCESS_TOKEN", ""),
        region=region,
        resilience=resilience,
    )
