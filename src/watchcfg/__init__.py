"""watchcfg - layered configuration for a file-watching service."""

__version__ = "0.1.0"
