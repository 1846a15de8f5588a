"""Entry point for courtside package."""

import argparse
import logging


def main() -> None:
    """Main entry point for the Courtside application."""
    parser = argparse.ArgumentParser(
        description="Courtside - Basketball League Core",
        prog="courtside",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Generate and validate a season schedule (no server)",
    )
    parser.add_argument(
        "--season",
        type=str,
        default="2025-26",
        help="Season id (default: 2025-26)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible pairings and game ids",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="API host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="API port (default: 8000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.demo:
        import pandas as pd

        from courtside.core.league import build_default_teams
        from courtside.core.random_source import make_rng
        from courtside.core.schedule import generate_schedule, validate_schedule

        print("Courtside - Basketball League Core (Demo Mode)")
        print("=" * 50)

        teams = build_default_teams()
        rng = make_rng(args.seed) if args.seed is not None else None
        games = generate_schedule(teams, args.season, rng=rng)
        validation = validate_schedule(games, teams, check_pairs=True)

        frame = pd.DataFrame([g.to_dict() for g in games])
        regular = frame[~frame["is_preseason"]]
        summary = pd.DataFrame({
            "games": regular["home_team_id"].value_counts() + regular["away_team_id"].value_counts(),
            "home": regular["home_team_id"].value_counts(),
            "preseason": (
                frame[frame["is_preseason"]]["home_team_id"].value_counts()
                .add(frame[frame["is_preseason"]]["away_team_id"].value_counts(), fill_value=0)
                .astype(int)
            ),
        }).sort_index()

        print(summary.to_string())
        print()
        print(f"Regular season: {len(regular)} games, preseason: {len(frame) - len(regular)} games")
        print(f"Valid: {validation.valid}")
        for issue in validation.issues:
            print(f"  - {issue}")
    else:
        from courtside.api.main import run_api

        run_api(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
