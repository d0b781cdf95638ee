"""Tests for project and node name validation."""
import pytest

from pochade.scaffold.validator import validate_node_name, validate_project_name


class TestValidateProjectName:
    """Test project name grammar."""

    @pytest.mark.parametrize("name", ["my-app", "my_app", "app2", "node-red-contrib-x", "a", "_-_"])
    def test_valid_names(self, name):
        """Lowercase letters, digits, hyphens and underscores are accepted."""
        assert validate_project_name(name) is None

    @pytest.mark.parametrize("name", ["My-App", "my app", "my.app", "my/app", "app!", "@scope/app"])
    def test_invalid_names(self, name):
        """Uppercase, spaces and other symbols are rejected with a reason."""
        reason = validate_project_name(name)
        assert reason == "Name must only contain lowercase letters, numbers, hyphens, and underscores"

    def test_empty_name(self):
        """Empty name is rejected."""
        assert validate_project_name("") == "Name cannot be empty"

    def test_trailing_newline_rejected(self):
        """Whole string must match, including the end."""
        assert validate_project_name("my-app\n") is not None


class TestValidateNodeName:
    """Test node name grammar."""

    @pytest.mark.parametrize("name", ["my-filter", "filter", "f1-2"])
    def test_valid_names(self, name):
        assert validate_node_name(name) is None

    @pytest.mark.parametrize("name", ["My_Node", "my_node", "MyNode", "my node"])
    def test_invalid_names(self, name):
        """Uppercase and underscores are both disallowed."""
        assert validate_node_name(name) == "Name must only contain lowercase letters, numbers, and hyphens"

    def test_empty_name(self):
        assert validate_node_name("") == "Name cannot be empty"
