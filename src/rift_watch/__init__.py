"""LoL live client status agent."""

__version__ = "0.1.0"
