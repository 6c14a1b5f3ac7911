from PyQt5.QtCore import QEvent, QPointF, Qt
from PyQt5.QtGui import QColor, QImage, QMouseEvent
from PyQt5.QtWidgets import QApplication

from inkmark.config import AppConfig
from inkmark.controllers import AnnotationController, ToolModeController
from inkmark.core.annotations import AnnotationManager, AnnotationType, HighlightRegion
from inkmark.core.page import RenderedPage
from inkmark.core.tool_mode import ToolMode
from inkmark.ui.widgets import AnnotationSurface


def _make_controller(page_number=1):
    surface = AnnotationSurface()
    image = QImage(300, 225, QImage.Format_RGB888)
    image.fill(QColor(255, 255, 255))
    surface.set_page(RenderedPage(page_number, image, (200, 150), 1.5), [])

    manager = AnnotationManager()
    annotations = AnnotationController(manager, AppConfig())
    tools = ToolModeController(surface, annotations)
    return surface, manager, tools


def _send(surface, event_type, x, y):
    if event_type == QEvent.MouseMove:
        button, buttons = Qt.NoButton, Qt.LeftButton
    elif event_type == QEvent.MouseButtonPress:
        button, buttons = Qt.LeftButton, Qt.LeftButton
    else:
        button, buttons = Qt.LeftButton, Qt.NoButton
    event = QMouseEvent(event_type, QPointF(x, y), button, buttons, Qt.NoModifier)
    QApplication.sendEvent(surface, event)


def _drag(surface, start, end, steps=3):
    _send(surface, QEvent.MouseButtonPress, *start)
    for i in range(1, steps + 1):
        x = start[0] + (end[0] - start[0]) * i / steps
        y = start[1] + (end[1] - start[1]) * i / steps
        _send(surface, QEvent.MouseMove, x, y)
    _send(surface, QEvent.MouseButtonRelease, *end)


def test_only_active_tool_reacts(qapp):
    surface, manager, tools = _make_controller()

    _drag(surface, (10, 10), (50, 50))
    assert manager.get_annotation_count() == 0

    tools.select(ToolMode.PEN)
    _drag(surface, (10, 10), (50, 50))
    assert [a.annotation_type for a in manager.annotations] == [AnnotationType.FREEHAND]

    tools.select(ToolMode.HIGHLIGHT)
    _drag(surface, (10, 10), (50, 50))
    assert [a.annotation_type for a in manager.annotations] == [
        AnnotationType.FREEHAND,
        AnnotationType.HIGHLIGHT,
    ]

    tools.select(ToolMode.NONE)
    _drag(surface, (10, 10), (50, 50))
    assert manager.get_annotation_count() == 2


def test_previous_tool_filter_is_removed(qapp):
    surface, _, tools = _make_controller()

    tools.select(ToolMode.PEN)
    tools.select(ToolMode.HIGHLIGHT)

    assert not tools.tool(ToolMode.PEN).is_active
    assert tools.tool(ToolMode.HIGHLIGHT).is_active
    assert tools.active_tool is tools.tool(ToolMode.HIGHLIGHT)


def test_highlight_drag_is_normalized(qapp):
    surface, manager, tools = _make_controller(page_number=2)
    tools.select(ToolMode.HIGHLIGHT)

    _drag(surface, (80, 90), (20, 30))

    assert manager.list_regions(2) == [HighlightRegion(20, 30, 60, 60)]


def test_highlight_click_without_drag_is_ignored(qapp):
    surface, manager, tools = _make_controller()
    tools.select(ToolMode.HIGHLIGHT)

    _send(surface, QEvent.MouseButtonPress, 40, 40)
    _send(surface, QEvent.MouseButtonRelease, 40, 40)

    assert manager.get_annotation_count() == 0


def test_drag_is_clamped_to_the_page(qapp):
    surface, manager, tools = _make_controller()
    tools.select(ToolMode.HIGHLIGHT)

    _drag(surface, (250, 200), (500, 400))

    assert manager.list_regions(1) == [HighlightRegion(250, 200, 50, 25)]


def test_pen_stroke_records_points(qapp):
    surface, manager, tools = _make_controller()
    tools.select(ToolMode.PEN)

    _drag(surface, (0, 0), (30, 30), steps=3)

    stroke = manager.annotations[0]
    assert stroke.points[0] == (0.0, 0.0)
    assert stroke.points[-1] == (30.0, 30.0)
    assert len(stroke.points) == 4


def test_mode_switch_mid_stroke_discards_it(qapp):
    surface, manager, tools = _make_controller()
    tools.select(ToolMode.PEN)

    _send(surface, QEvent.MouseButtonPress, 10, 10)
    _send(surface, QEvent.MouseMove, 20, 20)
    tools.select(ToolMode.HIGHLIGHT)
    _send(surface, QEvent.MouseButtonRelease, 30, 30)

    assert manager.get_annotation_count() == 0
    assert not tools.tool(ToolMode.PEN).is_drawing


def test_selecting_the_active_mode_keeps_it(qapp):
    _, _, tools = _make_controller()
    modes = []
    tools.mode_changed.connect(modes.append)

    tools.select(ToolMode.TEXT)
    tools.select(ToolMode.TEXT)

    assert tools.mode == ToolMode.TEXT
    assert modes == [ToolMode.TEXT]


def test_text_click_waits_for_input(qapp):
    surface, manager, tools = _make_controller()
    requests = []
    tools.text_input_requested.connect(lambda *args: requests.append(args))
    tools.select(ToolMode.TEXT)

    _send(surface, QEvent.MouseButtonPress, 40, 50)
    _send(surface, QEvent.MouseButtonRelease, 40, 50)
    # Further clicks are ignored while the first one awaits its text
    _send(surface, QEvent.MouseButtonPress, 70, 80)
    _send(surface, QEvent.MouseButtonRelease, 70, 80)

    assert requests == [(1, 40.0, 50.0)]
    assert tools.is_awaiting_text
    assert tools.finish_text_input() == (1, 40.0, 50.0)
    assert not tools.is_awaiting_text
    assert manager.get_annotation_count() == 0


def test_leaving_text_mode_cancels_pending_input(qapp):
    surface, _, tools = _make_controller()
    cancelled = []
    tools.text_input_cancelled.connect(lambda: cancelled.append(True))
    tools.select(ToolMode.TEXT)

    tools.begin_text_input(1, 5.0, 5.0)
    tools.select(ToolMode.PEN)

    assert cancelled == [True]
    assert tools.finish_text_input() is None


def test_begin_text_input_requires_text_mode(qapp):
    _, _, tools = _make_controller()

    assert tools.begin_text_input(1, 5.0, 5.0) is False


def test_tools_ignore_an_empty_surface(qapp):
    surface, manager, tools = _make_controller()
    surface.clear()
    tools.select(ToolMode.PEN)

    _drag(surface, (0, 0), (0, 0))

    assert manager.get_annotation_count() == 0


def test_shutdown_removes_every_tool(qapp):
    _, _, tools = _make_controller()
    tools.select(ToolMode.PEN)

    tools.shutdown()

    assert tools.mode == ToolMode.NONE
    assert not any(tools.tool(m).is_active for m in (ToolMode.PEN, ToolMode.TEXT, ToolMode.HIGHLIGHT))


def test_input_is_ignored_until_the_expected_page_is_shown(qapp):
    surface, manager, tools = _make_controller(page_number=1)
    tools.select(ToolMode.HIGHLIGHT)

    surface.expect_page(2)
    _drag(surface, (10, 10), (50, 50))
    assert manager.get_annotation_count() == 0

    surface.expect_page(1)
    _drag(surface, (10, 10), (50, 50))
    assert manager.list_regions(1) == [HighlightRegion(10, 10, 40, 40)]


def test_pen_preview_grows_in_place(qapp):
    surface, manager, tools = _make_controller()
    tools.select(ToolMode.PEN)

    _send(surface, QEvent.MouseButtonPress, 0, 0)
    preview = surface._preview[0]
    _send(surface, QEvent.MouseMove, 10, 10)
    _send(surface, QEvent.MouseMove, 20, 20)

    assert surface._preview == [preview]
    assert preview.points == [(0.0, 0.0), (10.0, 10.0), (20.0, 20.0)]

    _send(surface, QEvent.MouseButtonRelease, 20, 20)

    assert surface._preview == []
    assert manager.annotations[0].points == [(0.0, 0.0), (10.0, 10.0), (20.0, 20.0)]
    assert manager.annotations[0] is not preview
