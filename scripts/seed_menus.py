from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from menuadmin.logging_config import setup_logging
from menuadmin.seed import apply_seed, load_seed_file
from menuadmin.server.settings import Settings
from menuadmin.storage import MenuAdminStore


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    settings = Settings()
    parser = argparse.ArgumentParser(description="Load a menu fixture (YAML, TOML or JSON) into the menu database.")
    parser.add_argument("fixture", type=Path, help="Seed file with modules, screens, profiles, menus and assignments")
    parser.add_argument(
        "--db",
        type=Path,
        default=settings.db_path,
        help=f"SQLite database to populate (default: {settings.db_path})",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level, json_logs=False)

    seed = load_seed_file(args.fixture)
    store = MenuAdminStore(args.db)
    result = apply_seed(store, seed)
    print("Seed complete", {**result.summary(), "db": str(args.db)})


if __name__ == "__main__":
    main()
