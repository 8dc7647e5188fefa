"""Base class and shared context for sample scenarios."""

import logging
from dataclasses import dataclass, field

from partner_samples.config import Settings
from partner_samples.console import ConsoleHelper
from partner_samples.sdk import PartnerClient

logger = logging.getLogger(__name__)


@dataclass
class ScenarioContext:
    """Everything a scenario needs: the API client, the console and the settings."""

    client: PartnerClient
    console: ConsoleHelper = field(default_factory=ConsoleHelper)
    settings: Settings = field(default_factory=Settings)


class BasePartnerScenario:
    """
    A single sample procedure demonstrating one API workflow.

    Subclasses set ``title`` and implement ``run_scenario``.
    """

    title = ""

    def __init__(self, context: ScenarioContext):
        self.context = context

    @property
    def client(self) -> PartnerClient:
        return self.context.client

    @property
    def console(self) -> ConsoleHelper:
        return self.context.console

    def run(self) -> None:
        """Print the title and run the scenario."""
        logger.debug("Running scenario %s", type(self).__name__)
        self.console.header(self.title)
        self.run_scenario()

    def run_scenario(self) -> None:
        raise NotImplementedError

    def obtain_customer_id(self, prompt: str = "Enter the customer ID") -> str:
        """Use the configured customer ID, or ask for one."""
        customer_id = self.context.settings.customer_id
        if customer_id:
            self.console.success(f"Using customer ID: {customer_id}")
            return customer_id
        return self.console.read_non_empty_string(prompt, "The customer ID can't be empty")

    def obtain_subscription_id(self, customer_id: str, prompt: str = "Enter the subscription ID") -> str:
        """Use the configured subscription ID, or ask for one of the customer's subscriptions."""
        subscription_id = self.context.settings.subscription_id
        if subscription_id:
            self.console.success(f"Using subscription ID: {subscription_id}")
            return subscription_id
        logger.debug("Prompting for a subscription of customer %s", customer_id)
        return self.console.read_non_empty_string(prompt, "The subscription ID can't be empty")
