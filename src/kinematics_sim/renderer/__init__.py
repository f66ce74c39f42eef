# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for inspection or export.
    - axis_limits: Axis range from a curve's display hints.

The curve engine has no rendering dependency; these adapters are optional.

Typical usage:
    from kinematics_sim.renderer import DebugRenderer

    DebugRenderer().render_session(session)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    axis_limits,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "axis_limits",
]
