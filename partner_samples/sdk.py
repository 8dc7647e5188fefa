"""
Partner SDK - High-level client with nice ergonomics.

This layer provides a clean, typed interface for the subscription operations
the sample scenarios use. Built on top of the core APIClient.
"""

import urllib.parse

from partner_samples.core.client import APIClient, APIError
from partner_samples.core.types import (
    Availability,
    ResourceCollection,
    Subscription,
    TransitionEligibility,
)


def _quote(value: str) -> str:
    return urllib.parse.quote(value, safe="")


class PartnerClient:
    """
    High-level Partner Center client with typed methods.

    Example:
        client = PartnerClient()

        subscription = client.subscriptions.get(customer_id, subscription_id)
        subscription.quantity += 1
        updated = client.subscriptions.patch(customer_id, subscription_id, subscription)

    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        tenant_id: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        timeout: int = 60,
    ):
        """
        Initialize the Partner Center client.

        Args:
            access_token: Bearer token (or PARTNER_CENTER_ACCESS_TOKEN env var)
            base_url: API base URL (or PARTNER_CENTER_BASE_URL env var)
            tenant_id: Azure AD tenant for app authentication
            client_id: Application ID for app authentication
            client_secret: Application secret for app authentication
            timeout: Request timeout in seconds

        """
        self._client = APIClient(
            access_token=access_token,
            base_url=base_url,
            tenant_id=tenant_id,
            client_id=client_id,
            client_secret=client_secret,
            timeout=timeout,
        )

        # Sub-clients for different domains
        self.subscriptions = SubscriptionOperations(self._client)
        self.products = ProductOperations(self._client)


# =============================================================================
# Subscription Operations
# =============================================================================


class SubscriptionOperations:
    """Operations on a customer's subscriptions."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(self, customer_id: str) -> ResourceCollection[Subscription]:
        """
        List a customer's subscriptions.

        Args:
            customer_id: The customer tenant ID

        Returns:
            ResourceCollection of Subscriptions

        """
        result = self._client.customer_get(customer_id, "/subscriptions")
        return ResourceCollection.from_dict(result, Subscription.from_dict)

    def get(self, customer_id: str, subscription_id: str) -> Subscription:
        """
        Get a subscription by ID.

        Args:
            customer_id: The customer tenant ID
            subscription_id: The subscription ID

        Returns:
            Subscription details

        """
        result = self._client.customer_get(customer_id, f"/subscriptions/{_quote(subscription_id)}")
        return Subscription.from_dict(result)

    def patch(self, customer_id: str, subscription_id: str, subscription: Subscription) -> Subscription:
        """
        Update a subscription.

        The full subscription is sent back; the service applies the changed fields
        (quantity, scheduled next term instructions, ...).

        Args:
            customer_id: The customer tenant ID
            subscription_id: The subscription ID
            subscription: The subscription with its changes applied

        Returns:
            The updated Subscription

        Raises:
            APIError: If the reply is neither a subscription nor an empty acknowledgement

        """
        result = self._client.customer_patch(
            customer_id,
            f"/subscriptions/{_quote(subscription_id)}",
            subscription.to_dict(),
        )
        if "id" not in result:
            # 202 Accepted comes back without a body; the update is applied asynchronously
            if result.get("success"):
                return subscription
            raise APIError("Subscription update returned an unexpected response", details={"response": result})
        return Subscription.from_dict(result)

    def transition_eligibilities(
        self,
        customer_id: str,
        subscription_id: str,
        eligibility_type: str | None = None,
    ) -> ResourceCollection[TransitionEligibility]:
        """
        Get the catalog items a subscription can transition to.

        Args:
            customer_id: The customer tenant ID
            subscription_id: The subscription ID
            eligibility_type: "immediate" or "scheduled" (all when omitted)

        Returns:
            ResourceCollection of TransitionEligibility

        """
        result = self._client.customer_get(
            customer_id,
            f"/subscriptions/{_quote(subscription_id)}/transitioneligibilities",
            {"eligibilityType": eligibility_type},
        )
        return ResourceCollection.from_dict(result, TransitionEligibility.from_dict)


# =============================================================================
# Product Operations
# =============================================================================


class ProductOperations:
    """Operations on the catalog as seen by a customer."""

    def __init__(self, client: APIClient):
        self._client = client

    def availability(
        self,
        customer_id: str,
        product_id: str,
        sku_id: str,
        availability_id: str,
    ) -> Availability:
        """
        Get a catalog availability for a product SKU.

        Args:
            customer_id: The customer tenant ID
            product_id: The product ID
            sku_id: The SKU ID
            availability_id: The availability ID

        Returns:
            Availability with its terms

        """
        path = (
            f"/products/{_quote(product_id)}/skus/{_quote(sku_id)}"
            f"/availabilities/{_quote(availability_id)}"
        )
        result = self._client.customer_get(customer_id, path)
        if "id" not in result:
            raise APIError("Availability not returned", details={"response": result})
        return Availability.from_dict(result)
