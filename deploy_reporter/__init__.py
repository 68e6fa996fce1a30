"""Deploy Reporter - reports CI deployments and their status to GitHub."""

__version__ = "0.1.0"
