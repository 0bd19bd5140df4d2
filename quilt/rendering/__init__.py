"""
Granny Square Quilt - Rendering Module

PIL image/GIF rendering and a live pygame viewer.
"""

from .pil_renderer import FrameRecorder, render_quilt_to_image, save_quilt_image

__all__ = ['FrameRecorder', 'render_quilt_to_image', 'save_quilt_image']
