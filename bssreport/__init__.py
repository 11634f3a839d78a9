"""Work order status report and inventory walk for the business-support services."""

__version__ = "0.3.0"
