"""Provision Backlog.md task catalogs through the backlog CLI."""

__version__ = "0.1.0"
