"""Tests for question sequencing and answer sources."""
import io

import pytest
from rich.console import Console

from pochade.scaffold.answers import ConsoleAnswerSource, DefaultsAnswerSource
from pochade.scaffold.errors import UsageError
from pochade.scaffold.prompter import Prompter, PromptSpec
from pochade.scaffold.validator import validate_node_name
from pochade.scaffold.variants import default_node_name, node_plugin_prompts


class TestPrompter:
    """Test prompt collection."""

    def test_collect_in_order(self, answer_source, quiet_console):
        """Answers are stored under their keys in asking order."""
        source = answer_source({"Author name": "Ada", "License": "ISC"})
        specs = [
            PromptSpec("author_name", "Author name"),
            PromptSpec("license", "License", "MIT"),
        ]

        answers = Prompter(source, quiet_console).collect(specs, initial={"project_name": "demo"})

        assert list(answers) == ["project_name", "author_name", "license"]
        assert answers == {"project_name": "demo", "author_name": "Ada", "license": "ISC"}
        assert source.asked == ["Author name", "License"]

    def test_blank_answer_uses_default(self, answer_source, quiet_console):
        source = answer_source({"License": ""})
        answers = Prompter(source, quiet_console).collect([PromptSpec("license", "License", "MIT")])
        assert answers["license"] == "MIT"

    def test_blank_answer_without_default(self, answer_source, quiet_console):
        source = answer_source()
        answers = Prompter(source, quiet_console).collect([PromptSpec("author_name", "Author name")])
        assert answers["author_name"] == ""

    def test_reasks_until_valid(self, answer_source, quiet_console):
        """Rejected answers are re-asked and the reason is printed."""
        source = answer_source({"Node name": ["My_Node", "still bad", "my-node"]})
        spec = PromptSpec("node_name", "Node name", "fallback", validate_node_name)

        answer = Prompter(source, quiet_console).ask(spec)

        assert answer == "my-node"
        assert source.asked == ["Node name"] * 3
        output = quiet_console.file.getvalue()
        assert output.count("Name must only contain lowercase letters, numbers, and hyphens") == 2

    def test_max_attempts_gives_up(self, quiet_console):
        """Non-interactive sources stop after the attempt limit."""
        spec = PromptSpec("node_name", "Node name", "Bad_Default", validate_node_name)
        prompter = Prompter(DefaultsAnswerSource(), quiet_console, max_attempts=1)

        with pytest.raises(UsageError) as exc_info:
            prompter.ask(spec)

        assert "node_name" in str(exc_info.value)

    def test_validator_sees_default(self, answer_source, quiet_console):
        """An empty answer falls back to the default before validation."""
        source = answer_source({"Node name": ""})
        spec = PromptSpec("node_name", "Node name", "from-default", validate_node_name)
        assert Prompter(source, quiet_console).ask(spec) == "from-default"


class TestDefaultNodeName:
    """Test node name derived from the project name."""

    def test_strips_prefix(self):
        assert default_node_name("node-red-contrib-my-filter") == "my-filter"

    def test_without_prefix(self):
        assert default_node_name("my-filter") == "my-filter"

    def test_prefix_only_at_start(self):
        assert default_node_name("x-node-red-contrib-y") == "x-node-red-contrib-y"

    def test_prompt_default(self):
        specs = {spec.key: spec for spec in node_plugin_prompts("node-red-contrib-lamp")}
        assert specs["node_name"].default == "lamp"
        assert specs["node_name"].validator is validate_node_name


class FakeInputConsole:
    """Stands in for rich Console.input."""

    def __init__(self, reply):
        self.reply = reply
        self.prompts = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        return self.reply


class TestConsoleAnswerSource:
    """Test terminal answer source."""

    def test_shows_default_inline(self):
        console = FakeInputConsole("  answer  ")
        source = ConsoleAnswerSource(console)

        assert source.ask("License", "MIT") == "answer"
        assert console.prompts == ["License (MIT): "]

    def test_no_default(self):
        console = FakeInputConsole("Ada")
        source = ConsoleAnswerSource(console)

        assert source.ask("Author name") == "Ada"
        assert console.prompts == ["Author name: "]

    def test_blank_returns_default(self):
        source = ConsoleAnswerSource(FakeInputConsole("   "))
        assert source.ask("License", "MIT") == "MIT"


class TestDefaultsAnswerSource:
    def test_returns_default(self):
        assert DefaultsAnswerSource().ask("License", "MIT") == "MIT"
        assert DefaultsAnswerSource().ask("Author name") == ""
