"""
Models package - Data models for the POV GIF display
"""

from .enums import BlockIntroducer, BufferSlot, DisposalMethod, ExtensionLabel, LogLevel, LogCategory
from .color import Color
from .palette import Palette
from .picture import GraphicControl, Picture, Rect
from .screen import ScreenDescriptor

__all__ = [
    'BlockIntroducer',
    'BufferSlot',
    'DisposalMethod',
    'ExtensionLabel',
    'LogLevel',
    'LogCategory',
    'Color',
    'Palette',
    'GraphicControl',
    'Picture',
    'Rect',
    'ScreenDescriptor',
]
