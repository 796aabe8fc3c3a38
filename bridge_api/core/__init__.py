"""Core of the bridge: domain model and monitoring."""
