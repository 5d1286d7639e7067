"""
helixpath Post Processor Module

Renders planned waypoints into machine programs. Each post processor
inherits from PostProcessorBase and implements dialect-specific move
syntax with event hooks for customization.
"""

from .base import PostProcessorBase, PostProcessorConfig, EventHooks
from .gcode import GCodePostProcessor

__all__ = [
    'PostProcessorBase',
    'PostProcessorConfig',
    'EventHooks',
    'GCodePostProcessor',
]
