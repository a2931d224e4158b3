"""Profile inventory and deletion pipeline."""
