"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses matching Partner Center resources
- Low-level HTTP client with auth and error handling
"""

from partner_samples.core.client import APIClient, APIError, CLIError, ValidationError
from partner_samples.core.types import (
    Availability,
    BillingCycleType,
    Eligibility,
    ProductTerm,
    ResourceCollection,
    ScheduledNextTermInstructions,
    Subscription,
    Term,
    TransitionEligibility,
)

__all__ = [
    "APIClient",
    "APIError",
    "Availability",
    "BillingCycleType",
    "CLIError",
    "Eligibility",
    "ProductTerm",
    "ResourceCollection",
    "ScheduledNextTermInstructions",
    "Subscription",
    "Term",
    "TransitionEligibility",
    "ValidationError",
]
