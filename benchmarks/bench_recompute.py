"""
Microbenchmark: time per full recompute vs number of control points.
Run:
  python benchmarks/bench_recompute.py
"""
import numpy as np
from kinematics_sim import SimulationSession, make_points
from kinematics_sim.profiler import Profiler


def run(n_points: int, edits: int = 200):
    prof = Profiler()
    session = SimulationSession(profiler=prof)
    T = session.max_time

    rng = np.random.default_rng(12345)
    times = np.linspace(0.0, T, n_points)

    # warmup
    for _ in range(5):
        session.update_acceleration(make_points(zip(times, rng.normal(0, 10, n_points))))
    prof.reset()

    for _ in range(edits):
        values = rng.normal(0.0, 10.0, n_points)
        session.update_acceleration(make_points(zip(times, values)))
        session.update_velocity(session.velocity_points)

    return prof.stats.summary()["recompute"]


if __name__ == "__main__":
    for n in [4, 8, 16, 32, 64]:
        stats = run(n)
        print(f"points={n:3d}  recompute mean={stats['mean_ms']:7.3f} ms  max={stats['max_ms']:7.3f} ms")
