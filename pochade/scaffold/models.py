"""Project configuration models, one per scaffold variant."""
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, field_validator

from pochade.scaffold.validator import validate_node_name, validate_project_name


class Variant(str, Enum):
    """Kinds of project the scaffolder can create."""

    NODE_PLUGIN = "node-plugin"
    WEB = "web"


class ProjectConfig(BaseModel):
    """Answers shared by every variant."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    project_name: str
    project_description: str = ""
    author_name: str = ""
    license: str = ""

    @field_validator('project_name')
    @classmethod
    def check_project_name(cls, v):
        reason = validate_project_name(v)
        if reason:
            raise ValueError(reason)
        return v

    def tokens(self) -> Dict[str, str]:
        """Token name to replacement value, in field order."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class NodePluginConfig(ProjectConfig):
    """Answers for a Node-RED node package."""

    node_sidebar_title: str = ""
    node_name: str
    node_purpose: str = ""

    @field_validator('node_name')
    @classmethod
    def check_node_name(cls, v):
        reason = validate_node_name(v)
        if reason:
            raise ValueError(reason)
        return v


class WebProjectConfig(ProjectConfig):
    """Answers for a static web project."""

    author_email: str = ""
    github_username: str = ""
