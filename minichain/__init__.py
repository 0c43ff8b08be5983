"""A toy proof-of-work blockchain network with RSA-keyed nodes, an interactive menu and an RSA calculator."""

__version__ = "0.1.0"