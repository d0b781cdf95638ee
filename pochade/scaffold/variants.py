"""Per-variant scaffold definitions: questions, renames, substitution targets."""
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple, Type

from pochade.scaffold.models import NodePluginConfig, ProjectConfig, Variant, WebProjectConfig
from pochade.scaffold.prompter import PromptSpec
from pochade.scaffold.transformer import NODE_PLUGIN_TEXT_EXTENSIONS
from pochade.scaffold.validator import validate_node_name

NODE_RED_PREFIX = "node-red-contrib-"

LOGO = (
    ".-. .-. .-. . . .-. .-. .-.   . .-.\n"
    "|-' | | |   |-| |-| |  )|-    | `-.\n"
    "'   `-' `-' ' ` ` ' `-' `-' `-' `-'\n"
    "       Node-RED Plugins with Passion\n"
    "             By LNSY\n"
)

Rename = Tuple[str, str]


def default_node_name(project_name: str) -> str:
    """Strip the conventional Node-RED package prefix."""
    if project_name.startswith(NODE_RED_PREFIX):
        return project_name[len(NODE_RED_PREFIX):]
    return project_name


@dataclass(frozen=True)
class ScaffoldVariant:
    """Everything that differs between the node-plugin and web scaffolds.

    Attributes:
        variant: Variant identifier
        template_name: Directory under the template root
        config_model: Structured configuration type
        prompts: Builds the question list for a project name
        dotfiles: Staging names that receive a leading dot
        entry_renames: Builds (from, to) renames relative to the project root
        text_extensions: Extensions substituted across the whole tree
        entry_pages: Files substituted individually, relative to the root
        next_steps: Commands suggested after a successful run
        banner: Printed before prompting, if set
    """

    variant: Variant
    template_name: str
    config_model: Type[ProjectConfig]
    prompts: Callable[[str], List[PromptSpec]]
    dotfiles: Tuple[str, ...] = ("gitignore",)
    entry_renames: Callable[[ProjectConfig], List[Rename]] = lambda config: []
    text_extensions: FrozenSet[str] = frozenset()
    entry_pages: Tuple[str, ...] = ()
    next_steps: Tuple[str, ...] = ()
    banner: Optional[str] = None
    manifest_name: str = "package.json"

    def prompt_keys(self, project_name: str = "project") -> List[str]:
        return [spec.key for spec in self.prompts(project_name)]

    def build_config(self, answers: Dict[str, str]) -> ProjectConfig:
        return self.config_model(**answers)


def node_plugin_prompts(project_name: str) -> List[PromptSpec]:
    return [
        PromptSpec("project_description", "Project description", "A Node-RED node"),
        PromptSpec("node_sidebar_title", "Sidebar title (category)", "function"),
        PromptSpec("node_name", "Node name", default_node_name(project_name), validate_node_name),
        PromptSpec("node_purpose", "Node purpose", "Processes messages"),
        PromptSpec("author_name", "Author name", ""),
        PromptSpec("license", "License", "MIT"),
    ]


def node_plugin_renames(config: ProjectConfig) -> List[Rename]:
    node_name = config.node_name
    return [
        ("src/sample.js", f"src/{node_name}.js"),
        ("src/sample.html", f"src/{node_name}.html"),
    ]


def web_project_prompts(project_name: str) -> List[PromptSpec]:
    return [
        PromptSpec("project_description", "Project description", "A web project"),
        PromptSpec("author_name", "Author name", ""),
        PromptSpec("author_email", "Author email", ""),
        PromptSpec("github_username", "GitHub username", ""),
        PromptSpec("license", "License", "MIT"),
    ]


NODE_PLUGIN = ScaffoldVariant(
    variant=Variant.NODE_PLUGIN,
    template_name="node_plugin",
    config_model=NodePluginConfig,
    prompts=node_plugin_prompts,
    dotfiles=("gitignore", "npmignore"),
    entry_renames=node_plugin_renames,
    text_extensions=NODE_PLUGIN_TEXT_EXTENSIONS,
    next_steps=(
        "npm run install-plugin  # Installs this node to your local Node-RED",
        "npm run watch           # Develop with auto-restart",
    ),
    banner=LOGO,
)

WEB_PROJECT = ScaffoldVariant(
    variant=Variant.WEB,
    template_name="web_project",
    config_model=WebProjectConfig,
    prompts=web_project_prompts,
    dotfiles=("gitignore",),
    entry_pages=("index.html",),
    next_steps=(
        "npm run dev    # Start the dev server",
        "npm run build  # Build for production",
    ),
)

VARIANTS: Dict[Variant, ScaffoldVariant] = {
    Variant.NODE_PLUGIN: NODE_PLUGIN,
    Variant.WEB: WEB_PROJECT,
}


def get_variant(variant: Variant) -> ScaffoldVariant:
    return VARIANTS[Variant(variant)]
