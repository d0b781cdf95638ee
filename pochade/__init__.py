"""Pochade - project scaffolding for Node-RED plugins and web projects."""

__version__ = "0.3.0"
