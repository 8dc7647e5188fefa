"""
Sample scenarios.

Each scenario is a linear procedure: read input, call the SDK, print output.
"""

from partner_samples.scenarios.base import BasePartnerScenario, ScenarioContext
from partner_samples.scenarios.subscriptions import (
    GetSubscription,
    GetSubscriptions,
    UpdateSubscription,
    UpdateSubscriptionScheduledChange,
)

# Command-line key -> scenario class, in menu order
SCENARIOS: dict[str, type[BasePartnerScenario]] = {
    "get-subscriptions": GetSubscriptions,
    "get-subscription": GetSubscription,
    "update-subscription": UpdateSubscription,
    "update-scheduled-change": UpdateSubscriptionScheduledChange,
}

__all__ = [
    "SCENARIOS",
    "BasePartnerScenario",
    "GetSubscription",
    "GetSubscriptions",
    "ScenarioContext",
    "UpdateSubscription",
    "UpdateSubscriptionScheduledChange",
]
