"""Runtime settings for the sample scenarios."""

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Settings:
    """Connection settings and default IDs used by the scenarios."""

    base_url: str | None = None
    access_token: str | None = None
    tenant_id: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    customer_id: str | None = None
    subscription_id: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from PARTNER_CENTER_* environment variables. Blank values count as unset."""
        return cls(
            base_url=_env("PARTNER_CENTER_BASE_URL"),
            access_token=_env("PARTNER_CENTER_ACCESS_TOKEN"),
            tenant_id=_env("PARTNER_CENTER_TENANT_ID"),
            client_id=_env("PARTNER_CENTER_CLIENT_ID"),
            client_secret=_env("PARTNER_CENTER_CLIENT_SECRET"),
            customer_id=_env("PARTNER_CENTER_CUSTOMER_ID"),
            subscription_id=_env("PARTNER_CENTER_SUBSCRIPTION_ID"),
        )

    def with_overrides(self, **overrides: str | None) -> "Settings":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _env(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None
