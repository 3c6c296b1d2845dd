"""orderdesk: order list query engine and order-date normalization."""

__version__ = "0.1.0"
