# MIT License (see LICENSE)
"""
Headless tick driver.

Runs a session at a fixed frame delta with scripted controls and reports how
it ended. Run:
    python -m gravity_lander --ticks 600 --thrust-ticks 30 --render 60
"""
from __future__ import annotations
import argparse
import dataclasses
import logging
import sys

from .config import SOLAR_SYSTEM
from .controls import Control, ScriptedInput
from .hud import format_hud
from .renderer import DebugRenderer
from .session import Phase, Session

logger = logging.getLogger("gravity_lander")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gravity_lander", description=__doc__.splitlines()[1])
    p.add_argument("--ticks", type=int, default=600, help="maximum ticks to run")
    p.add_argument("--frame-dt", type=float, default=1 / 60, help="wall-clock seconds per tick")
    p.add_argument("--seed", type=int, default=None, help="seed for planet phases")
    p.add_argument("--gravity", type=float, default=None, help="override the game G")
    p.add_argument("--time-scale", type=int, default=0,
                   help="index into the time-scale table to start at")
    p.add_argument("--thrust-ticks", type=int, default=0,
                   help="hold thrust for this many ticks from the start")
    p.add_argument("--rotate", type=int, choices=(-1, 0, 1), default=0,
                   help="hold a rotation direction while thrusting")
    p.add_argument("--render", type=int, default=0, metavar="N",
                   help="print a debug frame every N ticks (0 disables)")
    p.add_argument("--log-level", default="INFO")
    return p


def run(args: argparse.Namespace) -> int:
    cfg = dataclasses.replace(SOLAR_SYSTEM, seed=args.seed)
    if args.gravity is not None:
        cfg = dataclasses.replace(cfg, gravitational_constant=args.gravity)

    session = Session(cfg)
    logger.info("running up to %d ticks, frame dt %.4f s", args.ticks, args.frame_dt)
    session.start()
    for _ in range(args.time_scale):
        session.cycle_time_scale()

    controls = ScriptedInput()
    renderer = DebugRenderer() if args.render > 0 else None

    for i in range(args.ticks):
        if i < args.thrust_ticks:
            controls.hold(Control.THRUST)
            if args.rotate < 0:
                controls.hold(Control.ROTATE_LEFT)
            elif args.rotate > 0:
                controls.hold(Control.ROTATE_RIGHT)
        else:
            controls.release(Control.THRUST, Control.ROTATE_LEFT, Control.ROTATE_RIGHT)

        session.tick(args.frame_dt, controls)

        if renderer is not None and i % args.render == 0:
            renderer.render_session(session)
        if session.phase is Phase.ENDED:
            break

    hud = format_hud(session.hud())
    print("  ".join(f"{k}={v}" for k, v in hud.items()))
    if session.report is None:
        print(f"still flying after {args.ticks} ticks (t={session.world.time:.2f})")
        return 0
    r = session.report
    print(f"{r.outcome.value}: touched {r.partner.name} at speed {r.speed:.2f}, altitude {r.altitude:.2f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
