"""
Asynchronous page rendering.
"""
from .render_worker import RenderWorker

__all__ = ['RenderWorker']
