"""CLI interface for Graphnotes - browse and search a vault from the terminal."""

import argparse
import json
import logging
import sys
from pathlib import Path

from graphnotes.config import Settings, get_settings
from graphnotes.errors import VaultError
from graphnotes.indexer import FileEntry, build, list_recursive_markdown, list_shallow
from graphnotes.search import GrepMatch, search
from graphnotes.storage import init_vault, is_vault


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BLUE = "\033[34m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level, logging.INFO),
    )


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def format_tree(entries: list[FileEntry], depth: int = 0) -> list[str]:
    """Render a file tree as indented lines, directories in blue."""
    lines = []
    indent = "  " * depth
    for entry in entries:
        if entry.is_directory:
            lines.append(f"{indent}{Colors.BLUE}{entry.name}/{Colors.RESET}")
            lines.extend(format_tree(list(entry.children or ()), depth + 1))
        else:
            lines.append(f"{indent}{entry.name}")
    return lines


def format_match(match: GrepMatch) -> str:
    before, hit, after = match.highlight()
    location = f"{Colors.CYAN}{match.filepath}{Colors.RESET}:{Colors.GREEN}{match.line_number}{Colors.RESET}"
    return f"{location}: {before}{Colors.BOLD}{Colors.YELLOW}{hit}{Colors.RESET}{after}"


def resolve_vault(path: str | None, settings: Settings) -> Path:
    """Use the path given on the command line, else GRAPHNOTES_VAULT_PATH, else the cwd."""
    if path:
        return Path(path)
    if settings.vault_path is not None:
        return settings.vault_path
    return Path.cwd()


def cmd_tree(args: argparse.Namespace, settings: Settings) -> None:
    entries = build(resolve_vault(args.path, settings))
    if args.json:
        print_json([e.to_dict() for e in entries])
        return
    for line in format_tree(entries):
        print(line)


def cmd_ls(args: argparse.Namespace, settings: Settings) -> None:
    entries = list_shallow(resolve_vault(args.path, settings))
    if args.json:
        print_json([e.to_dict() for e in entries])
        return
    for entry in entries:
        if entry.is_directory:
            print(f"{Colors.BLUE}{entry.name}/{Colors.RESET}")
        else:
            print(entry.name)


def cmd_notes(args: argparse.Namespace, settings: Settings) -> None:
    entries = list_recursive_markdown(resolve_vault(args.path, settings))
    if args.json:
        print_json([e.to_dict() for e in entries])
        return
    for entry in entries:
        print(entry.path)
    print(f"{Colors.DIM}{len(entries)} notes{Colors.RESET}")


def cmd_grep(args: argparse.Namespace, settings: Settings) -> None:
    max_results = args.max_results or settings.max_results
    matches = search(resolve_vault(args.vault, settings), args.pattern, max_results)
    if args.json:
        print_json([m.to_dict() for m in matches])
        return
    for match in matches:
        print(format_match(match))
    if not matches:
        print(f"{Colors.DIM}No matches for '{args.pattern}'{Colors.RESET}")


def cmd_init(args: argparse.Namespace, settings: Settings) -> None:
    vault_path = resolve_vault(args.path, settings)
    existed = is_vault(vault_path)
    config = init_vault(vault_path)
    if existed:
        print(f"{Colors.DIM}Vault already initialized: {vault_path}{Colors.RESET}")
    else:
        print(f"{Colors.GREEN}Initialized vault: {vault_path}{Colors.RESET}")
    if config is not None:
        print(f"{Colors.DIM}Device: {config.device_id}{Colors.RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphnotes",
        description="Browse and search a vault of markdown notes.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree = subparsers.add_parser("tree", help="Show the vault file tree")
    tree.add_argument("path", nargs="?", help="Vault directory (default: GRAPHNOTES_VAULT_PATH)")
    tree.add_argument("--json", action="store_true", help="Print JSON instead of text")
    tree.set_defaults(handler=cmd_tree)

    ls = subparsers.add_parser("ls", help="List one directory level")
    ls.add_argument("path", nargs="?", help="Directory to list")
    ls.add_argument("--json", action="store_true", help="Print JSON instead of text")
    ls.set_defaults(handler=cmd_ls)

    notes = subparsers.add_parser("notes", help="List every note in the vault")
    notes.add_argument("path", nargs="?", help="Vault directory")
    notes.add_argument("--json", action="store_true", help="Print JSON instead of text")
    notes.set_defaults(handler=cmd_notes)

    grep = subparsers.add_parser("grep", help="Search note contents (regex, or literal if invalid)")
    grep.add_argument("pattern", help="Pattern to search for")
    grep.add_argument("--vault", help="Vault directory")
    grep.add_argument(
        "-n",
        "--max-results",
        type=int,
        help="Maximum number of matching lines (default: GRAPHNOTES_MAX_RESULTS or 100)",
    )
    grep.add_argument("--json", action="store_true", help="Print JSON instead of text")
    grep.set_defaults(handler=cmd_grep)

    init = subparsers.add_parser("init", help="Create the .graphnotes metadata directory")
    init.add_argument("path", nargs="?", help="Vault directory")
    init.set_defaults(handler=cmd_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        return 1

    setup_logging(settings.log_level)

    try:
        args.handler(args, settings)
    except VaultError as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
