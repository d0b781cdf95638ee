"""package.json rewriting for freshly scaffolded projects."""
import json
from typing import Any, Dict, Optional

from pochade.core.logger import get_logger
from pochade.scaffold.errors import ManifestError
from pochade.scaffold.filestore import FileStore, LocalFileStore, PathLike
from pochade.scaffold.models import NodePluginConfig, ProjectConfig, Variant, WebProjectConfig

logger = get_logger(__name__)

INITIAL_VERSION = "0.1.0"
GITHUB_URL = "https://github.com/{username}/{project}"


class ManifestPatcher:
    """Overwrites package.json fields from the collected configuration."""

    def __init__(self, store: Optional[FileStore] = None):
        self.store = store or LocalFileStore()

    def patch(self, manifest_path: PathLike, config: ProjectConfig, variant: Variant) -> Dict[str, Any]:
        """Rewrite the manifest at ``manifest_path``.

        Args:
            manifest_path: Path to package.json inside the project
            config: Collected configuration for the variant
            variant: Which variant's field rules to apply

        Returns:
            The manifest as written

        Raises:
            ManifestError: If the manifest is missing or not a JSON object
        """
        manifest = self.load(manifest_path)

        manifest["name"] = config.project_name
        manifest["license"] = config.license

        if variant is Variant.NODE_PLUGIN:
            patch_node_plugin(manifest, config)
        elif variant is Variant.WEB:
            patch_web_project(manifest, config)

        self.store.write_text(manifest_path, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
        logger.debug(f"Patched manifest {manifest_path}")
        return manifest

    def load(self, manifest_path: PathLike) -> Dict[str, Any]:
        """Read and parse the manifest."""
        if not self.store.exists(manifest_path):
            raise ManifestError(f"Manifest not found: {manifest_path}")

        try:
            manifest = json.loads(self.store.read_text(manifest_path))
        except (OSError, ValueError) as e:
            raise ManifestError(f"Cannot parse manifest {manifest_path}: {e}") from e

        if not isinstance(manifest, dict):
            raise ManifestError(f"Manifest {manifest_path} must contain a JSON object")
        return manifest


def patch_node_plugin(manifest: Dict[str, Any], config: NodePluginConfig) -> None:
    """Apply Node-RED package fields.

    The registration table is replaced, never merged: the template ships a
    placeholder entry that must disappear.
    """
    manifest["author"] = config.author_name

    node_red = manifest.get("node-red")
    if isinstance(node_red, dict) and "nodes" in node_red:
        node_red["nodes"] = {config.node_name: f"src/{config.node_name}.js"}


def patch_web_project(manifest: Dict[str, Any], config: WebProjectConfig) -> None:
    """Apply web project fields."""
    manifest["version"] = INITIAL_VERSION
    manifest["description"] = config.project_description

    author = format_author(config.author_name, config.author_email)
    if author:
        manifest["author"] = author

    if config.github_username:
        url = GITHUB_URL.format(username=config.github_username, project=config.project_name)
        manifest["repository"] = {"type": "git", "url": f"git+{url}.git"}
        manifest["bugs"] = {"url": f"{url}/issues"}
        manifest["homepage"] = f"{url}#readme"

    # The generated project is an application, not a CLI
    manifest.pop("bin", None)


def format_author(name: str, email: str) -> str:
    """Compose ``"name <email>"``; empty when both parts are empty."""
    if email:
        return f"{name} <{email}>".strip()
    return name
