"""Fakes and sample payloads shared by the tests."""

import io

from partner_samples.config import Settings
from partner_samples.console import ConsoleHelper
from partner_samples.core.types import (
    Availability,
    ResourceCollection,
    Subscription,
    TransitionEligibility,
)
from partner_samples.scenarios import ScenarioContext

CUSTOMER_ID = "4a2d3c1e-0000-4000-8000-000000000001"
SUBSCRIPTION_ID = "9f1e2d3c-0000-4000-8000-000000000002"


def subscription_payload(**overrides) -> dict:
    """A subscription as returned by the API."""
    data = {
        "id": SUBSCRIPTION_ID,
        "offerId": "CFQ7TTC0LH18:0001:CFQ7TTC0K59S",
        "offerName": "Microsoft 365 Business Basic",
        "friendlyName": "Business Basic",
        "quantity": 5,
        "status": "active",
        "autoRenewEnabled": True,
        "billingCycle": "monthly",
        "termDuration": "P1Y",
        "commitmentEndDate": "2027-01-31T00:00:00Z",
        "orderId": "ord-123",
        "links": {"self": {"uri": f"/customers/{CUSTOMER_ID}/subscriptions/{SUBSCRIPTION_ID}"}},
        "attributes": {"etag": "abc", "objectType": "Subscription"},
    }
    data.update(overrides)
    return data


class ScriptedInput:
    """Feeds prepared answers to ConsoleHelper prompts and records the prompts."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class FakeSubscriptions:
    def __init__(self, subscription: Subscription, eligibilities: list[TransitionEligibility] | None = None):
        self.subscription = subscription
        self.eligibilities = eligibilities or []
        self.patched: list[Subscription] = []
        self.eligibility_types: list[str | None] = []

    def list(self, customer_id: str) -> ResourceCollection[Subscription]:
        return ResourceCollection(items=[self.subscription], total_count=1)

    def get(self, customer_id: str, subscription_id: str) -> Subscription:
        return Subscription.from_dict(self.subscription.to_dict())

    def patch(self, customer_id: str, subscription_id: str, subscription: Subscription) -> Subscription:
        self.patched.append(subscription)
        return Subscription.from_dict(subscription.to_dict())

    def transition_eligibilities(self, customer_id, subscription_id, eligibility_type=None):
        self.eligibility_types.append(eligibility_type)
        return ResourceCollection(items=self.eligibilities, total_count=len(self.eligibilities))


class FakeProducts:
    def __init__(self):
        self.requested: list[tuple[str, str, str, str]] = []

    def availability(self, customer_id, product_id, sku_id, availability_id) -> Availability:
        self.requested.append((customer_id, product_id, sku_id, availability_id))
        return Availability.from_dict(
            {
                "id": availability_id,
                "productId": product_id,
                "skuId": sku_id,
                "terms": [
                    {"duration": "P1M", "description": "One-Month commitment", "billingCycle": "monthly"},
                    {"duration": "P1Y", "description": "One-Year commitment", "billingCycle": "annual"},
                ],
            }
        )


class FakePartnerClient:
    def __init__(self, subscription: Subscription, eligibilities=None):
        self.subscriptions = FakeSubscriptions(subscription, eligibilities)
        self.products = FakeProducts()


def make_context(*answers: str, eligibilities=None, settings: Settings | None = None, subscription=None):
    """Build a ScenarioContext around a fake client and scripted console input."""
    scripted = ScriptedInput(*answers)
    console = ConsoleHelper(input_func=scripted, stdout=io.StringIO(), stderr=io.StringIO())
    client = FakePartnerClient(subscription or Subscription.from_dict(subscription_payload()), eligibilities)
    context = ScenarioContext(client=client, console=console, settings=settings or Settings())
    return context, scripted
