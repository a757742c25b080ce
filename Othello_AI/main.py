"""Entry point for Othello matches. Load config, wire players, start Othellogame."""

import random
from pathlib import Path

import yaml

from .utils.cli import parse_args
from .utils.logger import log_event, render_text
from .Othellogame import Othellogame
from .ComputerPlayer import ComputerPlayer
from .Player import HumanPlayer


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 8,
    "move_timeout_seconds": 60,
    "ai_level": 3,
    "black_level": None,
    "white_level": None,
    "ai_delay_seconds": 0.5,
    "strict_moves": True,
    "pass_in_search": False,
    "leaf_for_mover": False,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Othello_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML on top of DEFAULT_SETTINGS; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    if not isinstance(loaded, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings.update(loaded)
    return settings


def _pick(cli_value, settings, key, default=None):
    """First of CLI value, settings value, default that is not None."""
    if cli_value is not None:
        return cli_value
    value = settings.get(key)
    return default if value is None else value


def merge_options(args, settings):
    """CLI flags override settings; per-colour levels fall back to the shared level."""
    level = _pick(args.level, settings, "ai_level", 3)
    return {
        "board_size": _pick(args.board_size, settings, "board_size", 8),
        "move_timeout": _pick(args.timeout, settings, "move_timeout_seconds", 60),
        "black_level": _pick(args.black_level, settings, "black_level", level),
        "white_level": _pick(args.white_level, settings, "white_level", level),
        "delay": _pick(args.delay, settings, "ai_delay_seconds", 0.0),
        "strict_moves": False if args.permissive else bool(settings.get("strict_moves", True)),
        "pass_in_search": bool(args.pass_in_search or settings.get("pass_in_search", False)),
        "leaf_for_mover": bool(args.leaf_for_mover or settings.get("leaf_for_mover", False)),
        "seed": args.seed,
    }


def build_players(mode, options):
    rng = random.Random(options["seed"])

    def ai(color, level):
        return ComputerPlayer(
            color=color,
            level=level,
            rng=rng,
            delay=options["delay"],
            pass_on_no_moves=options["pass_in_search"],
            leaf_for_mover=options["leaf_for_mover"],
        )

    if mode == "ai-vs-ai":
        return ai(-1, options["black_level"]), ai(1, options["white_level"])
    if mode == "human-vs-ai":
        return HumanPlayer(color=-1), ai(1, options["white_level"])
    if mode == "ai-vs-human":
        return ai(-1, options["black_level"]), HumanPlayer(color=1)
    if mode == "human-vs-human":
        return HumanPlayer(color=-1), HumanPlayer(color=1)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    options = merge_options(args, settings)

    black, white = build_players(args.mode, options)
    log_event(
        f"Mode {args.mode}: black level {options['black_level']}, white level {options['white_level']}"
    )

    game = Othellogame(
        board_size=options["board_size"],
        move_timeout=options["move_timeout"],
        black_player=black,
        white_player=white,
        logger=log_event,
        renderer=render_text,
        strict_moves=options["strict_moves"],
        result_pause=0.0,
    )
    result = game.play()
    outcome = { -1: "Black wins", 1: "White wins", 0: "Draw" }
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
