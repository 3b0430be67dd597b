"""
Sprout CLI - Command-line interface for the engine.

Usage:
    sprout simulate --players alice bob --seed 7     Play a bot game to the end
    sprout serve --host 127.0.0.1 --port 8000        Run the HTTP API
"""

import argparse
import logging
import sys

from .logging_config import setup_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sprout - Garden drafting game engine",
        prog="sprout",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play a full game with random bots")
    simulate_parser.add_argument("--players", nargs="+", default=["alice", "bob"], help="Player ids in seating order")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Seed for the deck and the bots")
    simulate_parser.add_argument("--swarm", action="store_true", help="Pests drawn mid-game swarm every player")
    simulate_parser.add_argument("--grid-size", type=int, default=None, help="Garden side length")
    simulate_parser.add_argument("--quiet", "-q", action="store_true", help="Only print the result")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        return 1


def cmd_simulate(args):
    """Play a bot-only game and print its log."""
    from .bots import RandomPolicy
    from .config import GameSettings
    from .games.garden import GardenGame
    from .session import GameLoop, LoopState

    overrides = {}
    if args.swarm:
        overrides["swarm_on_refill"] = True
    if args.grid_size is not None:
        overrides["grid_size"] = args.grid_size

    try:
        settings = GameSettings.from_env(**overrides)
        game = GardenGame(args.players, settings=settings, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    bots = {
        pid: RandomPolicy(seed=None if args.seed is None else args.seed + i)
        for i, pid in enumerate(args.players)
    }
    result = GameLoop(game, bots).run()

    if not args.quiet:
        for line in game.state.log:
            print(line)
        print()

    if result.loop_state != LoopState.GAME_OVER:
        print(f"Game did not finish: {', '.join(result.errors)}")
        return 1

    print(f"Finished after {game.state.current_turn} rounds, {result.steps} actions")
    for player in game.state.players.values():
        print(f"  {player.player_id}: {player.score} points, infestation {player.infestation}")
    print(f"Winner: {game.get_winner()}")
    return 0


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("sprout.api.app:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
