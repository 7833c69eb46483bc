from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

from menuadmin.hierarchy import HierarchyAssembler, MenuTreePipeline, NodeBuilder
from menuadmin.logging_config import setup_logging
from menuadmin.models.menu_tree import ContainerNode, MenuForest, OrphanPolicy
from menuadmin.server.menu_profiles.models import MenuTreeDiagnostics
from menuadmin.server.settings import Settings
from menuadmin.storage import MenuAdminStore


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    settings = Settings()
    parser = argparse.ArgumentParser(description="Print the assembled menu tree of a profile.")
    parser.add_argument("profile_id", type=int, help="Profile whose menus are assembled")
    parser.add_argument("--db", type=Path, default=settings.db_path, help="SQLite menu database")
    parser.add_argument(
        "--orphan-policy",
        choices=[policy.value for policy in OrphanPolicy],
        default=settings.orphan_policy.value,
        help="What to do with menus whose parent is missing (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Emit the tree and anomalies as JSON")
    return parser.parse_args()


def render_text(forest: MenuForest) -> str:
    lines = []
    stack = [(node, 0) for node in reversed(forest.roots)]
    while stack:
        node, depth = stack.pop()
        suffix = f"  -> {'/'.join(node.route)}" if not isinstance(node, ContainerNode) else ""
        lines.append(f"{'  ' * depth}{node.label} [{node.order}]{suffix}")
        if isinstance(node, ContainerNode):
            stack.extend((child, depth + 1) for child in reversed(node.children))
    for anomaly in forest.anomalies:
        lines.append(f"! {anomaly.describe()}")
    return "\n".join(lines)


def main() -> None:
    args = parse_args()
    settings = Settings()
    setup_logging(settings.log_level, json_logs=False)

    if not args.db.exists():
        raise FileNotFoundError(f"Menu database not found: {args.db}")

    store = MenuAdminStore(args.db)
    pipeline = MenuTreePipeline(
        builder=NodeBuilder(settings.node_builder_config()),
        assembler=HierarchyAssembler(OrphanPolicy(args.orphan_policy)),
    )
    forest = pipeline.run(store.list_menu_profile_rows(args.profile_id))

    if args.json:
        payload = MenuTreeDiagnostics.from_forest(forest).model_dump(by_alias=True, exclude_none=True)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(render_text(forest) or f"Profile {args.profile_id} has no menus")


if __name__ == "__main__":
    main()
