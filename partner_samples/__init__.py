"""
Partner Samples - Interactive Partner Center subscription scenarios.

Layers:
- core: Raw types and HTTP client
- sdk: High-level PartnerClient with typed operations
- scenarios: Interactive sample procedures
- cli: Command-line entry point
"""

from partner_samples.sdk import PartnerClient

__version__ = "0.1.0"
__all__ = ["PartnerClient"]
