"""
Ludo Duel - command line entry point.
Pass-and-play in the terminal, or simulate many games headlessly.
"""

import argparse
import sys

from loguru import logger

from ludo_duel import Color, Dice, GameSession, Simulator, config, summarize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Ludo on a 28-cell track")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--seed", type=int, default=config.DICE_SEED)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("play", help="Pass-and-play in the terminal")

    sim = sub.add_parser("simulate", help="Play games automatically and report statistics")
    sim.add_argument("--games", type=int, default=100)
    sim.add_argument("--max-turns", type=int, default=config.MAX_TURNS)
    return parser


def render_status(session: GameSession) -> str:
    snap = session.snapshot()
    parts = [f"{color.display_name}: {pos}" for color, pos in snap.positions.items()]
    die = snap.last_roll if snap.last_roll is not None else "-"
    return f"[{' | '.join(parts)}] die={die} turn={snap.current_player.display_name}"


def play(seed) -> None:
    session = GameSession(dice=Dice(seed))
    print(session.message)
    while True:
        snap = session.snapshot()
        if not snap.can_roll:
            prompt = f"{snap.current_player.display_name} is home. [Enter] pass, r reset, q quit: "
        else:
            prompt = f"{snap.current_player.display_name} to roll. [Enter] roll, r reset, q quit: "
        try:
            choice = input(prompt).strip().lower()
        except EOFError:
            break
        if choice == "q":
            break
        if choice == "r":
            session.reset()
        else:
            session.roll_die()
        print(session.message)
        print(render_status(session))


def simulate(games: int, max_turns: int, seed) -> None:
    sim = Simulator(dice=Dice(seed), max_turns=max_turns)
    summary = summarize(sim.run(games))
    logger.info(f"Games played: {summary.games}")
    for color in Color:
        logger.info(
            f"   • {color.display_name}: {summary.wins[color]} wins "
            f"({summary.win_rate(color):.1%}), {summary.total_captures[color]} captures"
        )
    logger.info(f"   • Unfinished: {summary.unfinished}")
    logger.info(
        f"   • Rolls per game: mean {summary.mean_rolls:.1f}, "
        f"median {summary.median_rolls:.1f}, max {summary.max_rolls}"
    )


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    if args.command == "play":
        play(args.seed)
    else:
        simulate(args.games, args.max_turns, args.seed)


if __name__ == "__main__":
    main()
