"""Command-line tool for managed Kubernetes clusters on AWS."""

__version__ = "1.2.0"
