"""Bundled project templates, one directory per scaffold variant."""
