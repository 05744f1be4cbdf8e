"""
Unit tests for the manifest runner.

Package commands never run for real: a fake runner with the subprocess.run
signature returns canned exit codes.
"""

import subprocess
import pytest
from unittest.mock import MagicMock, call, patch

from progress_dialog.notifications import DialogNotifier, ItemStatus
from progress_dialog.runner import ManifestError, RunSummary, parse_phases, run_manifest


def make_manifest(*packages, phase="Core", **extra):
    manifest = {
        "title": "Setting up",
        "message": "Installing apps",
        "phases": [{"name": phase, "packages": list(packages)}],
    }
    manifest.update(extra)
    return manifest


class FakeRun:
    """Records commands and returns exit codes keyed by command text"""

    def __init__(self, exit_codes=None, errors=None):
        self.exit_codes = exit_codes or {}
        self.errors = errors or {}
        self.calls = []

    def __call__(self, command, shell=False, check=False):
        key = command if isinstance(command, str) else " ".join(command)
        self.calls.append((key, shell))
        if key in self.errors:
            raise self.errors[key]
        return subprocess.CompletedProcess(command, self.exit_codes.get(key, 0))


@pytest.fixture
def notifier():
    mock = MagicMock()
    mock.__exit__.return_value = False
    return mock


class TestParsePhases:

    def test_parses_packages(self):
        manifest = make_manifest(
            {"name": "Git", "install": "winget install Git.Git"},
            {"name": "Python", "download": ["curl", "-O", "py.exe"], "install": ["py.exe", "/quiet"],
             "skip_if_exists": "C:/Python/python.exe"},
        )
        phases = parse_phases(manifest)

        assert len(phases) == 1
        assert phases[0].name == "Core"
        git, python = phases[0].packages
        assert git.install == "winget install Git.Git"
        assert git.download is None
        assert python.download == ["curl", "-O", "py.exe"]
        assert python.skip_if_exists == "C:/Python/python.exe"

    def test_phase_without_packages(self):
        phases = parse_phases({"phases": [{"name": "Empty"}]})
        assert phases[0].packages == []

    @pytest.mark.parametrize("manifest", [
        {},
        {"phases": []},
        {"phases": "Core"},
        {"phases": [{"packages": []}]},
        {"phases": [{"name": "Core", "packages": [{"install": "x"}]}]},
        {"phases": [{"name": "Core", "packages": [{"name": "Git"}]}]},
        {"phases": [{"name": "Core", "packages": [{"name": "Git", "install": ""}]}]},
        {"phases": [{"name": "Core", "packages": [{"name": "Git", "install": [1, 2]}]}]},
    ])
    def test_invalid_manifests(self, manifest):
        with pytest.raises(ManifestError):
            parse_phases(manifest)

    def test_manifest_error_is_value_error(self):
        assert issubclass(ManifestError, ValueError)


class TestRunManifest:

    def test_all_packages_succeed(self, notifier):
        run = FakeRun()
        manifest = make_manifest(
            {"name": "Git", "install": "install-git"},
            {"name": "Python", "install": ["install-python", "/quiet"]},
        )

        summary = run_manifest(manifest, notifier, run=run)

        assert summary == RunSummary(succeeded=["Git", "Python"])
        assert summary.ok is True
        assert run.calls == [("install-git", True), ("install-python /quiet", False)]

        notifier.initialize.assert_called_once_with(
            "Setting up", "Installing apps", 2, icon=None, fullscreen=False, kiosk=False
        )
        notifier.add_item.assert_has_calls([
            call("Git", ItemStatus.PENDING),
            call("Python", ItemStatus.PENDING),
        ])
        notifier.notify_phase_started.assert_called_once_with("Core")
        notifier.notify_install_started.assert_has_calls([call("Git"), call("Python")])
        notifier.notify_package_success.assert_has_calls([call("Git"), call("Python")])
        notifier.complete.assert_called_once_with("Setup Complete")
        notifier.close.assert_called_once_with()
        notifier.__exit__.assert_called_once()

    def test_failed_install(self, notifier):
        run = FakeRun(exit_codes={"install-git": 1603})
        summary = run_manifest(make_manifest({"name": "Git", "install": "install-git"}), notifier, run=run)

        assert summary.failed == ["Git"]
        assert summary.ok is False
        notifier.notify_package_failure.assert_called_once_with("Git", "Exit code 1603")
        notifier.notify_package_success.assert_not_called()

    def test_launch_error_is_a_failure(self, notifier):
        run = FakeRun(errors={"missing-tool": FileNotFoundError("No such file: 'missing-tool'")})
        summary = run_manifest(make_manifest({"name": "Tool", "install": ["missing-tool"]}), notifier, run=run)

        assert summary.failed == ["Tool"]
        error_text = notifier.notify_package_failure.call_args[0][1]
        assert "missing-tool" in error_text

    def test_download_then_install(self, notifier):
        run = FakeRun()
        manifest = make_manifest({"name": "Git", "download": "fetch-git", "install": "install-git"})

        run_manifest(manifest, notifier, run=run)

        assert [c[0] for c in run.calls] == ["fetch-git", "install-git"]
        notifier.notify_download_started.assert_called_once_with("Git")
        notifier.notify_install_started.assert_called_once_with("Git")

    def test_download_failure_skips_install(self, notifier):
        run = FakeRun(exit_codes={"fetch-git": 22})
        manifest = make_manifest({"name": "Git", "download": "fetch-git", "install": "install-git"})

        summary = run_manifest(manifest, notifier, run=run)

        assert [c[0] for c in run.calls] == ["fetch-git"]
        assert summary.failed == ["Git"]
        notifier.notify_install_started.assert_not_called()
        notifier.notify_package_failure.assert_called_once_with("Git", "Exit code 22")

    def test_skip_if_exists(self, notifier, tmp_path):
        marker = tmp_path / "git.exe"
        marker.touch()
        run = FakeRun()
        manifest = make_manifest(
            {"name": "Git", "install": "install-git", "skip_if_exists": str(marker)},
            {"name": "Python", "install": "install-python", "skip_if_exists": str(tmp_path / "python.exe")},
        )

        summary = run_manifest(manifest, notifier, run=run)

        assert summary.skipped == ["Git"]
        assert summary.succeeded == ["Python"]
        assert summary.total == 2
        assert [c[0] for c in run.calls] == ["install-python"]
        notifier.notify_package_skipped.assert_called_once_with("Git")

    def test_display_options(self, notifier):
        manifest = make_manifest(
            {"name": "Git", "install": "install-git"},
            icon="logo.png", fullscreen=True, complete_message="All done",
        )

        run_manifest(manifest, notifier, run=FakeRun(), kiosk=True)

        notifier.initialize.assert_called_once_with(
            "Setting up", "Installing apps", 1, icon="logo.png", fullscreen=True, kiosk=True
        )
        notifier.complete.assert_called_once_with("All done")

    def test_invalid_manifest_shows_nothing(self, notifier):
        with pytest.raises(ManifestError):
            run_manifest({"phases": []}, notifier, run=FakeRun())
        notifier.initialize.assert_not_called()

    def test_multiple_phases(self, notifier):
        manifest = {
            "phases": [
                {"name": "Core", "packages": [{"name": "Git", "install": "install-git"}]},
                {"name": "Apps", "packages": [{"name": "Slack", "install": "install-slack"}]},
            ]
        }

        run_manifest(manifest, notifier, run=FakeRun())

        notifier.notify_phase_started.assert_has_calls([call("Core"), call("Apps")])
        assert notifier.initialize.call_args[0][2] == 2


class TestRunManifestWithDialog:
    """End to end against a real DialogNotifier and a patched dialog process"""

    @pytest.fixture
    def dialog(self, tmp_path):
        exe = tmp_path / "dialog.exe"
        exe.touch()
        return DialogNotifier(dialog_path=exe, command_file=tmp_path / "cmd" / "commands.txt", close_grace_period=0)

    def test_command_stream(self, dialog):
        manifest = make_manifest(
            {"name": "Git", "install": "install-git"},
            {"name": "Python", "install": "install-python"},
        )
        with patch("progress_dialog.notifications.dialog.subprocess.Popen") as popen:
            popen.return_value.poll.return_value = None
            run_manifest(manifest, dialog, run=FakeRun(exit_codes={"install-python": 1}))

        lines = dialog.command_file.read_commands()
        assert lines[:3] == [
            "listitem: add, title: Git, status: pending",
            "listitem: add, title: Python, status: pending",
            "progresstext: Phase: Core",
        ]
        assert "listitem: update, title: Python, status: fail, statustext: Exit code 1" in lines
        assert "progress: 50" in lines
        assert lines[-4:] == ["progresstext: Setup Complete", "progress: 100", "button1text: Done", "quit"]
        assert dialog.running is False

    def test_dialog_terminated_when_runner_crashes(self, dialog):
        def crashing_run(command, shell=False, check=False):
            raise RuntimeError("boom")

        manifest = make_manifest({"name": "Git", "install": "install-git"})
        with patch("progress_dialog.notifications.dialog.subprocess.Popen") as popen:
            popen.return_value.poll.return_value = None
            with pytest.raises(RuntimeError):
                run_manifest(manifest, dialog, run=crashing_run)

        popen.return_value.kill.assert_called_once_with()
        assert dialog.running is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
