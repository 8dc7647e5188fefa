"""Parsing of the values typed in by the user during a scenario."""

from datetime import datetime

from partner_samples.core.client import ValidationError
from partner_samples.core.types import BillingCycleType, parse_datetime


def parse_billing_cycle(text: str) -> BillingCycleType:
    """
    Parse a billing cycle by member name or wire value, ignoring case.

    "Monthly", "monthly", "one_time" and "oneTime" are all accepted.
    """
    key = text.strip().lower().replace("_", "")
    for member in BillingCycleType:
        if key in (member.name.lower().replace("_", ""), member.value.lower()):
            return member
    raise ValidationError(
        f"Invalid billing cycle: {text!r}",
        details={"allowed": [member.name.lower() for member in BillingCycleType]},
    )


def parse_optional_promotion_id(text: str | None) -> str | None:
    """Blank promotion IDs become None so the service picks an available promotion."""
    if text is None or not text.strip():
        return None
    return text.strip()


def parse_quantity(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValidationError(f"Invalid quantity: {text!r}")


def parse_custom_term_end_date(text: str | None) -> datetime | None:
    """Parse an ISO 8601 date; blank keeps the current term end date (None)."""
    if text is None or not text.strip():
        return None
    try:
        return parse_datetime(text.strip())
    except ValueError:
        raise ValidationError(f"Invalid custom term end date: {text!r}", details={"expected": "YYYY-MM-DD"})


def split_catalog_item_id(catalog_item_id: str) -> tuple[str, str, str]:
    """Split "product:sku:availability" into its three parts."""
    parts = catalog_item_id.split(":")
    if len(parts) != 3 or not all(parts):
        raise ValidationError(
            f"Invalid catalog item ID: {catalog_item_id!r}",
            details={"expected": "productId:skuId:availabilityId"},
        )
    return parts[0], parts[1], parts[2]
