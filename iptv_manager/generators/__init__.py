"""Sample data generators."""

from iptv_manager.generators.customer import SampleCustomerGenerator

__all__ = ["SampleCustomerGenerator"]
