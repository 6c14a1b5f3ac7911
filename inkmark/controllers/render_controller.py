"""
Controller that schedules page renders and drops stale results.
"""
import logging
from typing import Set

from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.core.page.models import RenderedPage
from inkmark.core.render import RenderWorker

logger = logging.getLogger(__name__)


class RenderController(QObject):
    """
    Runs page renders on worker threads.

    Each request bumps a generation counter; a finished render is applied only
    if no newer request was made while it was running.
    """

    # Signals
    page_rendered = pyqtSignal(object)  # RenderedPage
    render_failed = pyqtSignal(int, str)  # page number, message

    def __init__(self, scale: float, parent=None):
        super().__init__(parent)
        self.scale = scale
        self._generation = 0
        self._workers: Set[RenderWorker] = set()

    @property
    def generation(self) -> int:
        return self._generation

    def request_render(self, document_bytes: bytes, page_number: int) -> int:
        """
        Start rendering a page in the background.

        Args:
            document_bytes: Raw PDF bytes
            page_number: 1-based page number

        Returns:
            Generation assigned to this request
        """
        self._generation += 1
        worker = RenderWorker(document_bytes, page_number, self.scale, self._generation)

        worker.rendered.connect(self._on_rendered)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(lambda: self._release_worker(worker))

        self._workers.add(worker)
        worker.start()
        return self._generation

    def invalidate(self) -> None:
        """Discard the results of every render still in flight."""
        self._generation += 1

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def wait_for_idle(self) -> None:
        """Block until every running worker has finished."""
        for worker in list(self._workers):
            worker.wait()

    def shutdown(self) -> None:
        """Invalidate pending renders and wait for the workers to stop."""
        self.invalidate()
        self.wait_for_idle()

    def _on_rendered(self, generation: int, rendered: RenderedPage):
        if not self.is_current(generation):
            logger.debug(
                "Discarding stale render of page %d (generation %d, current %d)",
                rendered.page_number, generation, self._generation,
            )
            return
        self.page_rendered.emit(rendered)

    def _on_failed(self, generation: int, page_number: int, message: str):
        if not self.is_current(generation):
            return
        self.render_failed.emit(page_number, message)

    def _release_worker(self, worker: RenderWorker):
        self._workers.discard(worker)
        worker.deleteLater()
