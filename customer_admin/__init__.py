"""Admin console for electricity-contract-reduction customer records."""

__version__ = "0.1.0"
