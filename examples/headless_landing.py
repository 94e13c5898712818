# examples/headless_landing.py
# Drop a ship straight onto a single stationary planet and report the touchdown.
from gravity_lander import CelestialCfg, Session, SessionCfg
from gravity_lander.renderer import BufferedRenderer

cfg = SessionCfg(
    gravitational_constant=0.01,
    anchor=CelestialCfg(name="Sun", mass=1.0, radius=30.0),
    planets=(CelestialCfg(name="Earth", mass=20000.0, radius=13.0, orbit_radius=400.0),),
    spawn_clearance=40.0,
    seed=7,
)

session = Session(cfg)
session.start()
renderer = BufferedRenderer()

ticks = 0
while session.report is None and ticks < 20_000:
    session.tick(1 / 60)
    if ticks % 60 == 0:
        renderer.render_session(session)
    ticks += 1

print("ticks:", ticks, "frames:", len(renderer.frames))
if session.report is not None:
    r = session.report
    print(f"{r.outcome.value} on {r.partner.name}: speed={r.speed:.2f} altitude={r.altitude:.2f}")
