"""Name validation for projects and Node-RED nodes.

Validators return ``None`` for a valid name and a human-readable reason
otherwise, so they can drive both the CLI and the prompt re-ask loop.
"""
import re
from typing import Optional

PROJECT_NAME_PATTERN = re.compile(r'[a-z0-9\-_]+')
NODE_NAME_PATTERN = re.compile(r'[a-z0-9\-]+')


def validate_project_name(name: str) -> Optional[str]:
    """Validate a package/project name (URL-friendly, no spaces)."""
    if not name:
        return "Name cannot be empty"
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return "Name must only contain lowercase letters, numbers, hyphens, and underscores"
    return None


def validate_node_name(name: str) -> Optional[str]:
    """Validate a node name; it ends up in filenames and registry keys."""
    if not name:
        return "Name cannot be empty"
    if not NODE_NAME_PATTERN.fullmatch(name):
        return "Name must only contain lowercase letters, numbers, and hyphens"
    return None
