"""
Core types for Partner Center API resources.

These dataclasses provide type safety and IDE support for API responses.
Resources that are sent back to the service keep the raw payload so that
fields not modelled here survive a round trip.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

# =============================================================================
# Collections
# =============================================================================


T = TypeVar("T")


@dataclass
class ResourceCollection(Generic[T]):
    """A collection response ({"totalCount": n, "items": [...]})."""

    items: list[T]
    total_count: int

    @classmethod
    def from_dict(cls, data: dict[str, Any], parser) -> "ResourceCollection[T]":
        """Create from API response dict, parsing each item."""
        items = [parser(item) for item in data.get("items") or []]
        return cls(items=items, total_count=data.get("totalCount", len(items)))


# =============================================================================
# Enums and helpers
# =============================================================================


class BillingCycleType(Enum):
    """Billing cycle of a subscription or product term."""

    UNKNOWN = "unknown"
    MONTHLY = "monthly"
    ANNUAL = "annual"
    NONE = "none"
    ONE_TIME = "oneTime"
    TRIENNIAL = "triennial"

    @classmethod
    def from_wire(cls, value: str | None) -> "BillingCycleType | None":
        """Map an API value to a member, tolerating unexpected casing."""
        if value is None:
            return None
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        return cls.UNKNOWN


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp as returned by the API."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_datetime(value: datetime | None) -> str | None:
    """Format a datetime for the API (UTC, trailing Z). Naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


# =============================================================================
# Scheduled change types
# =============================================================================


@dataclass
class ProductTerm:
    """The product, SKU and term a subscription changes to."""

    product_id: str
    sku_id: str
    availability_id: str
    billing_cycle: BillingCycleType
    term_duration: str
    promotion_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductTerm":
        """Create from API response dict."""
        return cls(
            product_id=data.get("productId", ""),
            sku_id=data.get("skuId", ""),
            availability_id=data.get("availabilityId", ""),
            billing_cycle=BillingCycleType.from_wire(data.get("billingCycle")) or BillingCycleType.UNKNOWN,
            term_duration=data.get("termDuration", ""),
            promotion_id=data.get("promotionId"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {
            "productId": self.product_id,
            "skuId": self.sku_id,
            "availabilityId": self.availability_id,
            "billingCycle": self.billing_cycle.value,
            "termDuration": self.term_duration,
            "promotionId": self.promotion_id,
        }


@dataclass
class ScheduledNextTermInstructions:
    """Instructions applied to a subscription at the start of its next term."""

    product: ProductTerm
    quantity: int
    custom_term_end_date: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScheduledNextTermInstructions":
        """Create from API response dict."""
        return cls(
            product=ProductTerm.from_dict(data.get("product") or {}),
            quantity=data.get("quantity", 0),
            custom_term_end_date=parse_datetime(data.get("customTermEndDate")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "customTermEndDate": format_datetime(self.custom_term_end_date),
        }


# =============================================================================
# Subscription Types
# =============================================================================


@dataclass
class Subscription:
    """A customer subscription."""

    id: str
    offer_id: str | None = None
    offer_name: str | None = None
    friendly_name: str | None = None
    quantity: int = 0
    status: str | None = None
    auto_renew_enabled: bool | None = None
    billing_cycle: BillingCycleType | None = None
    term_duration: str | None = None
    commitment_end_date: str | None = None
    scheduled_next_term_instructions: ScheduledNextTermInstructions | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subscription":
        """Create from API response dict."""
        instructions = data.get("scheduledNextTermInstructions")
        return cls(
            id=data["id"],
            offer_id=data.get("offerId"),
            offer_name=data.get("offerName"),
            friendly_name=data.get("friendlyName"),
            quantity=data.get("quantity", 0),
            status=data.get("status"),
            auto_renew_enabled=data.get("autoRenewEnabled"),
            billing_cycle=BillingCycleType.from_wire(data.get("billingCycle")),
            term_duration=data.get("termDuration"),
            commitment_end_date=data.get("commitmentEndDate"),
            scheduled_next_term_instructions=(
                ScheduledNextTermInstructions.from_dict(instructions) if instructions else None
            ),
            raw=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request, keeping fields this class does not model."""
        result = dict(self.raw)
        result.update(
            {
                "id": self.id,
                "offerId": self.offer_id,
                "offerName": self.offer_name,
                "friendlyName": self.friendly_name,
                "quantity": self.quantity,
                "status": self.status,
                "autoRenewEnabled": self.auto_renew_enabled,
                "billingCycle": self._billing_cycle_value(),
                "termDuration": self.term_duration,
                "commitmentEndDate": self.commitment_end_date,
                "scheduledNextTermInstructions": (
                    self.scheduled_next_term_instructions.to_dict() if self.scheduled_next_term_instructions else None
                ),
            }
        )
        return result

    def _billing_cycle_value(self) -> str | None:
        # An unchanged cycle goes back exactly as received, including values the enum does not list
        raw_value = self.raw.get("billingCycle")
        if self.billing_cycle is BillingCycleType.from_wire(raw_value):
            return raw_value
        return self.billing_cycle.value if self.billing_cycle else None


# =============================================================================
# Transition Eligibility Types
# =============================================================================


@dataclass
class Eligibility:
    """Whether a transition of one type is allowed, and why not."""

    is_eligible: bool
    transition_type: str | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Eligibility":
        """Create from API response dict."""
        return cls(
            is_eligible=bool(data.get("isEligible", False)),
            transition_type=data.get("transitionType"),
            errors=data.get("errors") or [],
        )


@dataclass
class TransitionEligibility:
    """Eligibility of a subscription to move to a catalog item."""

    catalog_item_id: str
    eligibilities: list[Eligibility] = field(default_factory=list)

    @property
    def is_eligible(self) -> bool:
        """Check if any transition to this catalog item is allowed."""
        return any(item.is_eligible for item in self.eligibilities)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransitionEligibility":
        """Create from API response dict."""
        return cls(
            catalog_item_id=data.get("catalogItemId", ""),
            eligibilities=[Eligibility.from_dict(item) for item in data.get("eligibilities") or []],
        )


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass
class Term:
    """A term offered by a catalog availability."""

    duration: str
    description: str | None = None
    billing_cycle: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Term":
        """Create from API response dict."""
        return cls(
            duration=data.get("duration", ""),
            description=data.get("description"),
            billing_cycle=data.get("billingCycle"),
        )


@dataclass
class Availability:
    """A catalog availability of a product SKU."""

    id: str
    product_id: str | None = None
    sku_id: str | None = None
    catalog_item_id: str | None = None
    terms: list[Term] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Availability":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            product_id=data.get("productId"),
            sku_id=data.get("skuId"),
            catalog_item_id=data.get("catalogItemId"),
            terms=[Term.from_dict(term) for term in data.get("terms") or []],
        )
