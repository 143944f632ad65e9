"""Model-based property testing of the coffee shop order service."""
