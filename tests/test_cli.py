# MIT License (see LICENSE)
from gravity_lander.__main__ import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.ticks == 600
    assert args.render == 0


def test_headless_run_reports(capsys):
    assert main(["--ticks", "5", "--seed", "1", "--gravity", "0", "--thrust-ticks", "2",
                 "--render", "2", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "velocity=" in out
    assert "still flying after 5 ticks" in out
    assert "=== Frame" in out
