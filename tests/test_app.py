from __future__ import annotations

import logging
from pathlib import Path

import pytest

import mdedit.app as app_mod
import mdedit.main as main_mod
from mdedit.services.config.app_config import EditorOptions

# ----------------------------
# Fakes (Qt)
# ----------------------------


class FakeSignal:
    def __init__(self) -> None:
        self.slots: list[object] = []

    def connect(self, slot) -> None:
        self.slots.append(slot)


class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.exec_called = 0
        self.aboutToQuit = FakeSignal()

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    def exec(self) -> int:
        self.exec_called += 1
        return 0


# ----------------------------
# Fakes (composition)
# ----------------------------


class FakeWindow:
    def __init__(self) -> None:
        self.shown = False

    def show(self) -> None:
        self.shown = True


class FakeStore:
    def flush(self) -> None:
        pass


class FakeContainer:
    def __init__(self) -> None:
        self.window = FakeWindow()
        self.document_store = FakeStore()
        self.build_args: dict | None = None

    def build_main_window(self, *, app_title: str = "Markdown Editor"):
        self.build_args = {"app_title": app_title}
        return self.window


class FakeConfig:
    def __init__(
        self, options: EditorOptions | None = None, loaded_from: Path | None = None
    ) -> None:
        self._options = options or EditorOptions(preview_engine="text")
        self.loaded_from = loaded_from

    def get_version(self) -> str:
        return "1.2.3"

    def editor_options(self) -> EditorOptions:
        return self._options


@pytest.fixture()
def wired(monkeypatch):
    container = FakeContainer()
    config = FakeConfig()
    seen: dict[str, object] = {}

    def fake_default(*args, **kwargs):
        seen["default_kwargs"] = kwargs
        return container

    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)
    monkeypatch.setattr(app_mod, "configure_logging", lambda: logging.getLogger("mdedit"))
    monkeypatch.setattr(app_mod, "build_app_config", lambda: config)
    monkeypatch.setattr(app_mod.Container, "default", staticmethod(fake_default))
    return container, config, seen


# ----------------------------
# Tests
# ----------------------------


def test_run_app_builds_and_shows_window(wired) -> None:
    container, config, seen = wired

    rc = app_mod.run_app(["mdedit"])

    assert rc == 0
    assert container.window.shown is True
    assert container.build_args == {"app_title": app_mod.APP_NAME}
    assert seen["default_kwargs"] == {"config": config}

    assert FakeQApplication.org_name == app_mod.APP_ORG
    assert FakeQApplication.app_name == app_mod.APP_NAME


def test_run_app_logs_where_configuration_came_from(wired, caplog, tmp_path) -> None:
    _, config, _ = wired

    with caplog.at_level(logging.INFO, logger="mdedit.app"):
        app_mod.run_app(["mdedit"])
    assert "Configuration: built-in defaults" in caplog.text

    caplog.clear()
    config.loaded_from = tmp_path / "config.ini"
    with caplog.at_level(logging.INFO, logger="mdedit.app"):
        app_mod.run_app(["mdedit"])
    assert f"Configuration: {tmp_path / 'config.ini'}" in caplog.text


def test_run_app_flushes_document_store_on_quit(wired, monkeypatch) -> None:
    container, _, _ = wired
    apps: list[FakeQApplication] = []

    class RecordingQApplication(FakeQApplication):
        def __init__(self, argv):
            super().__init__(argv)
            apps.append(self)

    monkeypatch.setattr(app_mod, "QApplication", RecordingQApplication)
    app_mod.run_app(["mdedit", "--ignored"])

    [app] = apps
    assert app.argv == ["mdedit", "--ignored"]
    assert app.aboutToQuit.slots == [container.document_store.flush]
    assert app.exec_called == 1


def test_preload_webengine_is_skipped_for_text_preview(monkeypatch) -> None:
    import builtins

    real_import = builtins.__import__
    attempted: list[str] = []

    def spy(name, *args, **kwargs):
        if name.startswith("PyQt6.QtWebEngine"):
            attempted.append(name)
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", spy)
    app_mod._preload_webengine("text")
    assert attempted == []


def test_preload_webengine_tolerates_missing_package(monkeypatch, caplog) -> None:
    import builtins

    real_import = builtins.__import__

    def no_webengine(name, *args, **kwargs):
        if name.startswith("PyQt6.QtWebEngine"):
            raise ImportError("not installed")
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", no_webengine)
    with caplog.at_level(logging.INFO, logger="mdedit.app"):
        app_mod._preload_webengine("auto")
    assert "falls back to QTextBrowser" in caplog.text


def test_main_passes_sys_argv(monkeypatch) -> None:
    seen: list[list[str]] = []
    monkeypatch.setattr(main_mod, "run_app", lambda argv: seen.append(list(argv)) or 7)
    monkeypatch.setattr(main_mod.sys, "argv", ["mdedit", "x"])

    assert main_mod.main() == 7
    assert seen == [["mdedit", "x"]]


def test_version_file_matches_package_version() -> None:
    from mdedit import __version__

    root = Path(__file__).resolve().parents[1]
    assert (root / "version").read_text(encoding="utf-8").strip().lstrip("v") == __version__
