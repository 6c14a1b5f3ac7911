import time
from dataclasses import replace

import pytest
from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtGui import QColor, QKeyEvent
from PyQt5.QtWidgets import QApplication, QMessageBox

from inkmark.config import AppConfig
from inkmark.core.annotations import HighlightRegion
from inkmark.core.tool_mode import ToolMode
from inkmark.styles import ThemeManager
from inkmark.ui.windows import MainWindow


def _wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def window(qapp, tmp_path):
    config = replace(AppConfig(), default_document=str(tmp_path / "absent.pdf"))
    w = MainWindow(config)
    yield w
    w.close()
    w.render_controller.shutdown()


def _key(window, key):
    window.keyPressEvent(QKeyEvent(QEvent.KeyPress, key, Qt.NoModifier))


def test_window_starts_empty(window):
    assert not window.pdf_reader.is_loaded()
    assert window.surface.page_number is None
    assert not window.toolbar.save_button.isEnabled()
    assert window.navigation_bar.page_label.text() == "Page 0 of 0"


def test_loading_shows_first_page(window, pdf_bytes):
    assert window.load_document_bytes(pdf_bytes, "input.pdf")

    assert _wait_until(lambda: window.surface.page_number == 1)
    assert window.surface.width() == 300
    assert window.navigation_bar.page_label.text() == "Page 1 of 3"
    assert window.toolbar.save_button.isEnabled()


def test_keyboard_navigation(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)

    _key(window, Qt.Key_Right)
    assert _wait_until(lambda: window.surface.page_number == 2)

    _key(window, Qt.Key_PageDown)
    _key(window, Qt.Key_PageDown)
    assert window.navigator.current_page == 3

    _key(window, Qt.Key_Left)
    assert window.navigator.current_page == 2


def test_escape_leaves_tool_mode(window):
    window.tool_controller.select(ToolMode.PEN)
    assert window.toolbar.mode_buttons[ToolMode.PEN].isChecked()

    _key(window, Qt.Key_Escape)

    assert window.tool_controller.mode == ToolMode.NONE
    assert not window.toolbar.mode_buttons[ToolMode.PEN].isChecked()


def test_new_annotation_recomposes_the_surface(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)
    before = window.surface.flattened_frame()

    window.annotation_controller.add_highlight(1, HighlightRegion(10, 10, 100, 100))

    after = window.surface.flattened_frame()
    assert after != before
    assert after.pixelColor(50, 50).blue() < 180


def test_invalid_document_is_reported(window, monkeypatch):
    errors = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *args: errors.append(args))

    assert window.load_document_bytes(b"not a pdf") is False
    assert len(errors) == 1
    assert not window.pdf_reader.is_loaded()


def test_loading_clears_previous_annotations(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    window.annotation_controller.add_highlight(1, HighlightRegion(0, 0, 10, 10))

    window.load_document_bytes(pdf_bytes)

    assert window.annotation_manager.get_annotation_count() == 0


def test_export_from_window(window, pdf_bytes, tmp_path):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)
    window.annotation_controller.add_highlight(1, HighlightRegion(10, 10, 100, 100))
    results = []
    window.export_finished.connect(lambda ok, msg: results.append(ok))
    output = tmp_path / "edited-sample.pdf"

    window.start_export(str(output))

    assert _wait_until(lambda: results == [True])
    assert output.exists()
    assert window.export_worker is None


def test_clicking_the_active_mode_button_keeps_the_mode(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    pen_button = window.toolbar.mode_buttons[ToolMode.PEN]

    pen_button.click()
    pen_button.click()

    assert window.tool_controller.mode == ToolMode.PEN
    assert pen_button.isChecked()


def _request_text(window, x=40.0, y=50.0):
    window.tool_controller.select(ToolMode.TEXT)
    assert window.tool_controller.begin_text_input(1, x, y)
    dialog = window._text_dialog
    assert dialog is not None
    return dialog


def test_text_dialog_adds_blue_text_at_click_point(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)

    dialog = _request_text(window)
    dialog.setTextValue("Note")
    dialog.accept()

    texts = window.annotation_manager.get_annotations_for_page(1)
    assert len(texts) == 1
    assert texts[0].text == "Note"
    assert texts[0].position == (40.0, 50.0)
    assert texts[0].color == (0, 0, 255, 255)
    assert not window.tool_controller.is_awaiting_text


def test_cancelled_or_empty_text_adds_nothing(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)

    _request_text(window).reject()
    assert not window.tool_controller.is_awaiting_text

    dialog = _request_text(window)
    dialog.setTextValue("")
    dialog.accept()

    assert not window.tool_controller.is_awaiting_text
    assert window.annotation_manager.get_annotation_count() == 0


def test_strokes_and_text_survive_page_changes(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)
    window.annotation_controller.add_stroke(1, [(10.0, 10.0), (120.0, 90.0)])
    window.annotation_controller.add_text(1, (40.0, 150.0), "Kept")
    annotated = window.surface.flattened_frame()

    window.navigator.next_page()
    assert _wait_until(lambda: window.surface.page_number == 2)
    window.navigator.previous_page()
    assert _wait_until(lambda: window.surface.page_number == 1)

    assert window.surface.flattened_frame() == annotated
    assert window.annotation_manager.get_annotation_count() == 2


def test_failed_export_allows_saving_again(window, pdf_bytes, tmp_path, monkeypatch):
    errors = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *args: errors.append(args))
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)
    results = []
    window.export_finished.connect(lambda ok, msg: results.append(ok))

    window.start_export(str(tmp_path / "missing" / "out.pdf"))

    assert _wait_until(lambda: results == [False])
    assert len(errors) == 1
    assert window.export_worker is None


def test_surface_border_follows_the_theme(window):
    ThemeManager.apply_theme(window, True)
    window.surface.ensurePolished()

    assert window.surface.borderColor == QColor(
        ThemeManager.theme_for(True).surface_border
    )


def test_tools_wait_for_the_new_page(window, pdf_bytes):
    window.load_document_bytes(pdf_bytes)
    assert _wait_until(lambda: window.surface.page_number == 1)

    window.navigator.next_page()

    assert window.surface.page_number == 1
    assert not window.surface.accepts_input()
    assert _wait_until(lambda: window.surface.page_number == 2)
    assert window.surface.accepts_input()
