"""Professional-network manager with tiered accounts, profiles, follow networks and XML storage."""

__version__ = "0.1.0"
__all__ = ["__version__"]