"""
Display engine: compositor, swap scheduler, tick loop, session driver
"""

from .display_session import DisplaySession, SessionHalted, ShowResult
from .frame_compositor import FrameCompositor
from .pov_renderer import PovRenderer
from .swap_scheduler import SwapScheduler
from .tick_loop import TickLoop

__all__ = [
    'DisplaySession',
    'SessionHalted',
    'ShowResult',
    'FrameCompositor',
    'PovRenderer',
    'SwapScheduler',
    'TickLoop',
]
