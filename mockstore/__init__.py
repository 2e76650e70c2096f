"""Mock store endpoints (foodstore, medstore) with field-discovery validation."""

__version__ = "0.1.0"
