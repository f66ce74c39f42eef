# examples/drag_velocity.py
from kinematics_sim import SimulationSession
from kinematics_sim.renderer import DebugRenderer

session = SimulationSession(lock_end_velocity=False)
renderer = DebugRenderer(verbose=True)
renderer.render_session(session)

# Lift the first interior velocity point by 5 m/s; acceleration follows
edited = list(session.velocity_points)
edited[1] = edited[1].with_value(edited[1].value + 5.0)
session.update_velocity(edited)
renderer.render_session(session)

# Push the first interior position point 3 m further
edited = list(session.position_points)
edited[1] = edited[1].with_value(edited[1].value + 3.0)
session.update_position(edited)
renderer.render_session(session)
