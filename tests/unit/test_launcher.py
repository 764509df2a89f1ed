"""Unit tests for the viewer launcher."""

import subprocess
from pathlib import Path

from odt_creator.adapters.platform import SubprocessLauncher, default_candidates


class RecordingSpawn:
    """Fake process spawner failing for selected executables."""

    def __init__(self, missing: set[str] | None = None) -> None:
        self.missing = missing or set()
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str]) -> object:
        self.calls.append(args)
        if args[0] in self.missing:
            raise FileNotFoundError(f"No such file or directory: '{args[0]}'")
        return object()


class TestDefaultCandidates:
    """Tests for default_candidates."""

    def test_linux_order(self) -> None:
        assert default_candidates("linux") == [
            ["libreoffice"],
            ["openoffice"],
            ["xdg-open"],
        ]

    def test_other_unix_uses_linux_order(self) -> None:
        assert default_candidates("freebsd14") == default_candidates("linux")

    def test_macos(self) -> None:
        assert default_candidates("darwin") == [["open"]]

    def test_windows(self) -> None:
        assert default_candidates("win32") == [["cmd", "/C", "start", ""]]

    def test_returns_copies(self) -> None:
        candidates = default_candidates("darwin")
        candidates[0].append("--oops")
        assert default_candidates("darwin") == [["open"]]


class TestSubprocessLauncher:
    """Tests for SubprocessLauncher."""

    def test_first_candidate_starts(self) -> None:
        spawn = RecordingSpawn()
        launcher = SubprocessLauncher([["libreoffice"], ["xdg-open"]], spawn=spawn)

        assert launcher.launch(Path("/tmp/doc.odt")) is True
        assert spawn.calls == [["libreoffice", str(Path("/tmp/doc.odt"))]]

    def test_falls_back_in_order(self) -> None:
        spawn = RecordingSpawn(missing={"libreoffice", "openoffice"})
        launcher = SubprocessLauncher(default_candidates("linux"), spawn=spawn)

        assert launcher.launch(Path("doc.odt")) is True
        assert [c[0] for c in spawn.calls] == ["libreoffice", "openoffice", "xdg-open"]

    def test_path_appended_after_arguments(self) -> None:
        spawn = RecordingSpawn()
        launcher = SubprocessLauncher(default_candidates("win32"), spawn=spawn)

        launcher.launch(Path("doc.odt"))
        assert spawn.calls == [["cmd", "/C", "start", "", "doc.odt"]]

    def test_all_fail_returns_false(self) -> None:
        spawn = RecordingSpawn(missing={"libreoffice", "openoffice", "xdg-open"})
        launcher = SubprocessLauncher(default_candidates("linux"), spawn=spawn)

        assert launcher.launch(Path("doc.odt")) is False
        assert len(spawn.calls) == 3

    def test_permission_error_is_not_fatal(self) -> None:
        def spawn(args: list[str]) -> object:
            raise PermissionError("denied")

        launcher = SubprocessLauncher([["open"]], spawn=spawn)
        assert launcher.launch(Path("doc.odt")) is False

    def test_no_candidates(self) -> None:
        assert SubprocessLauncher([]).launch(Path("doc.odt")) is False

    def test_keeps_started_process(self) -> None:
        process = object()
        launcher = SubprocessLauncher([["open"]], spawn=lambda args: process)

        launcher.launch(Path("doc.odt"))

        assert launcher.processes == [process]

    def test_default_spawn_detaches_session(self) -> None:
        launcher = SubprocessLauncher([["open"]])
        assert launcher.spawn.func is subprocess.Popen
        assert launcher.spawn.keywords == {"start_new_session": True}
