# MIT License (see LICENSE)
"""
Numeric constants and defaults shared by the curve engine and the session.

Times are in seconds, acceleration in m/s², velocity in m/s and
position in m. Nothing here is derived at runtime; SimulationConfig
copies these values as its defaults.
"""
from __future__ import annotations

# Length of the simulated window and spacing of the dense series.
# 5.0 / 0.01 gives 501 samples including both ends.
DEFAULT_MAX_TIME: float = 5.0
DEFAULT_DT: float = 0.01

# Fixed advance of a single manual step() while paused.
STEP_INCREMENT: float = 0.1

# Velocity edits are mapped back onto the acceleration point whose time
# lies within this distance of the edited point.
MATCH_TOLERANCE: float = 0.01

# Slack used when deciding whether the last grid sample lands on max_time.
GRID_EPS: float = 1e-9

# Default acceleration sketch: speed up, brake hard, coast to rest.
DEFAULT_ACCEL_PAIRS: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (1.5, 15.0),
    (3.0, -20.0),
    (5.0, 0.0),
)

# Peak acceleration of the ease-in/ease-out preset.
EASE_PEAK: float = 18.0

# Curve kind names accepted by SimulationSession.update().
ACCELERATION = "acceleration"
VELOCITY = "velocity"
POSITION = "position"
CURVE_KINDS: tuple[str, ...] = (ACCELERATION, VELOCITY, POSITION)
