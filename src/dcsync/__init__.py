"""dcsync - synchronize content type schemas with a Dynamic Content hub."""

__version__ = "0.1.0"
