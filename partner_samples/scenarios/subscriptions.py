"""Subscription scenarios: retrieval, quantity update and scheduled change update."""

from partner_samples.core.types import ProductTerm, ScheduledNextTermInstructions
from partner_samples.scenarios.base import BasePartnerScenario
from partner_samples.scenarios.inputs import (
    parse_billing_cycle,
    parse_custom_term_end_date,
    parse_optional_promotion_id,
    parse_quantity,
    split_catalog_item_id,
)


class GetSubscriptions(BasePartnerScenario):
    """Lists a customer's subscriptions."""

    title = "Get customer subscriptions"

    def run_scenario(self) -> None:
        customer_id = self.obtain_customer_id("Enter the ID of the customer whose subscriptions to list")

        self.console.start_progress("Querying customer subscriptions")
        subscriptions = self.client.subscriptions.list(customer_id)
        self.console.stop_progress()

        if subscriptions.total_count <= 0:
            self.console.success("The customer has no subscriptions")
            return
        self.console.write_object(subscriptions.items, "Customer subscriptions")


class GetSubscription(BasePartnerScenario):
    """Gets a single customer subscription."""

    title = "Get customer subscription by ID"

    def run_scenario(self) -> None:
        customer_id = self.obtain_customer_id()
        subscription_id = self.obtain_subscription_id(customer_id, "Enter the ID of the subscription to retrieve")

        self.console.start_progress("Retrieving customer subscription")
        subscription = self.client.subscriptions.get(customer_id, subscription_id)
        self.console.stop_progress()

        self.console.write_object(subscription, "Customer subscription")


class UpdateSubscription(BasePartnerScenario):
    """Increments the quantity of an existing customer subscription."""

    title = "Update existing customer subscription"

    def run_scenario(self) -> None:
        customer_id = self.obtain_customer_id()
        subscription_id = self.obtain_subscription_id(customer_id, "Enter the ID of the subscription to update")

        self.console.start_progress("Retrieving customer subscription")
        existing = self.client.subscriptions.get(customer_id, subscription_id)
        self.console.stop_progress()
        self.console.write_object(existing, "Existing subscription")

        self.console.start_progress("Incrementing subscription quantity")
        existing.quantity += 1
        updated = self.client.subscriptions.patch(customer_id, subscription_id, existing)
        self.console.stop_progress()

        self.console.write_object(updated, "Updated subscription")


class UpdateSubscriptionScheduledChange(BasePartnerScenario):
    """Schedules a product/term change for the next term of a customer subscription."""

    title = "Update customer subscription scheduled change"

    def run_scenario(self) -> None:
        console = self.console
        customer_id = self.obtain_customer_id()
        subscription_id = self.obtain_subscription_id(
            customer_id, "Enter the ID of the subscription to update the scheduled change for"
        )

        console.start_progress("Getting subscription")
        subscription = self.client.subscriptions.get(customer_id, subscription_id)
        console.stop_progress()
        console.write_object(subscription, "Existing subscription")

        console.start_progress("Retrieving transition eligibilities for scheduled change")
        transitions = self.client.subscriptions.transition_eligibilities(
            customer_id, subscription_id, eligibility_type="scheduled"
        )
        console.stop_progress()

        if transitions.total_count <= 0:
            console.error("This subscription has no eligible transitions for scheduled change")
            return

        console.write_object(transitions.items, "Available transition eligibilities")

        catalog_item_id = console.read_non_empty_string(
            "Enter the scheduled change catalog item ID",
            "Scheduled change catalog item ID can't be empty",
        )
        selected = next((t for t in transitions.items if t.catalog_item_id == catalog_item_id), None)

        if selected is None:
            console.error(
                "The entered scheduled change catalog item ID was not found in the list of transition eligibilities"
            )
            return
        if not selected.is_eligible:
            console.error("The entered scheduled change catalog item ID is not eligible for the following reasons:")
            console.write_object(selected.eligibilities, indent=1)
            return

        product_id, sku_id, availability_id = split_catalog_item_id(selected.catalog_item_id)

        console.start_progress("Retrieving catalog availability terms")
        availability = self.client.products.availability(customer_id, product_id, sku_id, availability_id)
        console.stop_progress()
        console.write_object(availability.terms, "Available catalog availability terms")

        billing_cycle = parse_billing_cycle(
            console.read_non_empty_string(
                "Enter the scheduled change billing cycle",
                "Scheduled change billing cycle can't be empty",
            )
        )
        term_duration = console.read_non_empty_string(
            "Enter the scheduled change term duration",
            "Scheduled change term duration can't be empty",
        )
        promotion_id = parse_optional_promotion_id(
            console.read_optional_string(
                "Enter the scheduled promotion id or leave blank to automatically check and fill "
                "with an available promotion"
            )
        )
        quantity = parse_quantity(
            console.read_non_empty_string(
                "Enter the scheduled change quantity",
                "Scheduled change quantity can't be empty",
            )
        )
        custom_term_end_date = parse_custom_term_end_date(
            console.read_optional_string(
                "Enter the scheduled change custom term end date or leave blank to keep the current term end date"
            )
        )

        console.start_progress("Updating subscription scheduled change")
        subscription.scheduled_next_term_instructions = ScheduledNextTermInstructions(
            product=ProductTerm(
                product_id=product_id,
                sku_id=sku_id,
                availability_id=availability_id,
                billing_cycle=billing_cycle,
                term_duration=term_duration,
                promotion_id=promotion_id,
            ),
            quantity=quantity,
            custom_term_end_date=custom_term_end_date,
        )
        updated = self.client.subscriptions.patch(customer_id, subscription_id, subscription)
        console.stop_progress()

        console.write_object(updated, "Updated subscription scheduled change")
