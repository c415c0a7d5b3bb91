import argparse
import logging
from src.sudoku_simple.config import SETTINGS
from src.sudoku_simple.console import Console
from src.sudoku_simple.game import GameRunner, GameConfig


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Play the fixed Sudoku puzzle in the terminal.")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen before redrawing the board")
    ap.add_argument("--metrics", action="store_true", help="Print session metrics when the game ends")
    ap.add_argument("--game-log", action="store_true", help="Log every turn outcome at INFO")
    args = ap.parse_args(argv)

    # Logging setup
    log_level = (args.log_level or SETTINGS.log_level).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("play")

    gcfg = GameConfig(
        clear_screen=SETTINGS.clear_screen and not args.no_clear,
        game_log=args.game_log,
    )
    console = Console(clear_screen=gcfg.clear_screen)
    runner = GameRunner(console=console, cfg=gcfg)
    log.info("Starting game: clear_screen=%s", gcfg.clear_screen)
    reason = runner.play()

    if args.metrics or SETTINGS.show_metrics:
        print("Metrics:", runner.metrics())
    if reason != "solved":
        log.info("Session ended before the puzzle was solved (%s)", reason)

    console.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
