# examples/realtime_playback.py
import logging

from kinematics_sim import RealtimeTickSource, SimulationConfig, SimulationSession, setup_logging

setup_logging(logging.INFO)

ticks = RealtimeTickSource(fps=30)
session = SimulationSession(config=SimulationConfig(playback_speed=2.0), tick_source=ticks)


def show(event):
    if event == "playback":
        s = session.current_sample()
        print(f"t={s.t:5.2f}  x={s.position:7.2f} m  v={s.velocity:6.2f} m/s")


session.add_listener(show)
session.play()
ticks.run()
