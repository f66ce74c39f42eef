# examples/minimal_session.py
from kinematics_sim import SimulationSession, make_points

session = SimulationSession()

print("accel points:", [(p.t, round(p.value, 3)) for p in session.accel_points])
print("v_end:", session.velocity[-1])
print("x_end:", session.position[-1])

# Drag the middle acceleration points
session.update_acceleration(make_points([(0, 0), (1.0, 12), (3.5, -8), (5, 0)]))
print("after edit, x_end:", session.position[-1])
