from __future__ import annotations

from pathlib import Path

import pytest

from fakes import InlineTaskRunner, ScriptedDialogs
from mdedit.di.container import Container
from mdedit.services.config.app_config import build_app_config
from mdedit.services.exporters.base import ExporterRegistryInst
from mdedit.services.exporters.markdown_exporter import MarkdownExporter
from mdedit.services.ui.presenters.main_presenter import MainPresenter
from mdedit.utils.constants import SAMPLE_DOCUMENT


def _config(tmp_path: Path, *, pdf: bool):
    ini = tmp_path / "config.ini"
    ini.write_text(
        "[features]\n"
        f"pdf_export = {'true' if pdf else 'false'}\n"
        "[export]\n"
        f"directory = {tmp_path / 'downloads'}\n"
        "[ui]\n"
        "preview_engine = text\n",
        encoding="utf-8",
    )
    return build_app_config(explicit_ini=ini, project_root=tmp_path)


def _container(tmp_path: Path, qsettings, *, pdf: bool = False, **kw) -> Container:
    return Container(
        qsettings=qsettings,
        config=_config(tmp_path, pdf=pdf),
        dialogs=ScriptedDialogs(None),
        tasks=InlineTaskRunner(),
        **kw,
    )


def test_container_wires_services_and_registers_markdown_exporter(tmp_path, qsettings):
    c = _container(tmp_path, qsettings)
    assert c.renderer is not None
    assert c.file_service is not None
    assert c.settings_service is not None
    assert c.document_store is not None

    names = [e.name for e in c.exporters.all()]
    assert names == ["md"]
    assert c.pdf_export_enabled is False


def test_pdf_exporter_registered_only_behind_flag(tmp_path, qsettings):
    c = _container(tmp_path, qsettings, pdf=True)
    assert {e.name for e in c.exporters.all()} == {"md", "pdf"}
    assert c.pdf_export_enabled is True


def test_existing_registrations_are_kept(tmp_path, qsettings, file_service):
    reg = ExporterRegistryInst()
    mine = MarkdownExporter(file_service)
    reg.register(mine)

    c = _container(tmp_path, qsettings, exporters=reg)
    assert c.exporters.get("md") is mine


def test_containers_do_not_share_registries(tmp_path, qsettings):
    a = _container(tmp_path, qsettings, pdf=True)
    b = _container(tmp_path, qsettings)
    assert a.exporters is not b.exporters
    assert b.pdf_export_enabled is False


def test_options_come_from_config(tmp_path, qsettings):
    c = _container(tmp_path, qsettings)
    assert c.options.preview_engine == "text"
    assert c.options.export_directory == tmp_path / "downloads"


@pytest.mark.usefixtures("qapp")
def test_build_main_window_attaches_and_starts_presenter(tmp_path, qsettings):
    c = _container(tmp_path, qsettings)
    win = c.build_main_window(app_title="Test Editor")
    try:
        assert isinstance(win.presenter, MainPresenter)
        assert win.windowTitle() == "Test Editor"
        assert win.editor.toPlainText() == SAMPLE_DOCUMENT
        assert win.act_export_pdf.isVisible() is False
    finally:
        win.close()
