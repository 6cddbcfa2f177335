from PyQt6.QtCore import QSettings

from mdedit.services.document_store import DocumentStore
from mdedit.utils.constants import SETTINGS_DOCUMENT


def test_load_absent_returns_none(document_store: DocumentStore):
    assert document_store.load() is None


def test_save_then_load(document_store: DocumentStore):
    document_store.save("# hi\n\nthere")
    assert document_store.load() == "# hi\n\nthere"


def test_last_write_wins(document_store: DocumentStore):
    document_store.save("one")
    document_store.save("two")
    assert document_store.load() == "two"


def test_survives_new_qsettings_instance(tmp_settings_path):
    first = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    DocumentStore(first).save("persisted")
    first.sync()

    second = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    assert DocumentStore(second).load() == "persisted"


def test_non_string_value_is_ignored(qsettings: QSettings):
    qsettings.setValue(SETTINGS_DOCUMENT, 42)
    assert DocumentStore(qsettings).load() is None


def test_custom_key(qsettings: QSettings):
    store = DocumentStore(qsettings, key="other/doc")
    store.save("x")
    assert qsettings.value("other/doc") == "x"
    assert DocumentStore(qsettings).load() is None
