"""Tests for dependency installation."""
from unittest.mock import Mock, patch

from pochade.scaffold.installer import COMMAND_NOT_FOUND, InstallResult, NpmInstaller


class TestNpmInstaller:
    """Test the package manager subprocess wrapper."""

    def test_runs_install_in_directory(self, tmp_path):
        with patch("pochade.scaffold.installer.subprocess.run") as run:
            run.return_value = Mock(returncode=0)
            result = NpmInstaller().install(str(tmp_path))

        run.assert_called_once_with(["npm", "install"], cwd=str(tmp_path), check=False)
        assert result == InstallResult(exit_code=0)
        assert result.ok

    def test_custom_package_manager(self, tmp_path):
        with patch("pochade.scaffold.installer.subprocess.run") as run:
            run.return_value = Mock(returncode=0)
            NpmInstaller("pnpm").install(str(tmp_path))

        assert run.call_args[0][0] == ["pnpm", "install"]

    def test_non_zero_exit(self, tmp_path):
        with patch("pochade.scaffold.installer.subprocess.run") as run:
            run.return_value = Mock(returncode=1)
            result = NpmInstaller().install(str(tmp_path))

        assert result.exit_code == 1
        assert not result.ok

    def test_missing_executable(self, tmp_path):
        with patch("pochade.scaffold.installer.subprocess.run", side_effect=FileNotFoundError):
            result = NpmInstaller("no-such-pm").install(str(tmp_path))

        assert result.exit_code == COMMAND_NOT_FOUND

    def test_mock_mode_skips_subprocess(self, tmp_path):
        with patch("pochade.scaffold.installer.subprocess.run") as run:
            result = NpmInstaller(mock=True).install(str(tmp_path))

        run.assert_not_called()
        assert result.ok
