"""
Utility modules for the POV GIF display
"""

from .logger import (
    get_logger,
    get_category_logger,
    configure_logger,
)
from .trace import Trace, TraceEntry, get_trace

__all__ = [
    'get_logger',
    'get_category_logger',
    'configure_logger',
    'Trace',
    'TraceEntry',
    'get_trace',
]
