"""Client library for the Grafana HTTP API."""

__version__ = "0.1.0"