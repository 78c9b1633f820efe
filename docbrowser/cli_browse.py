import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docbrowser.config.settings import configure_logging
from docbrowser.container import container
from docbrowser.entities.listing import Listing
from docbrowser.use_cases.files.file_store import FileStore
from docbrowser.use_cases.files.operation_result import OperationResult


def _format_size(size: int) -> str:
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024.0:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024.0
    return f"{value:.1f} TB"


def render_listing(console: Console, listing: Listing, plain: bool = False) -> None:
    if plain:
        for entry in listing.visible:
            console.print(entry.name + ("/" if entry.is_dir else ""), markup=False)
        return

    title = escape(listing.current_directory)
    if listing.search_filter:
        title += f"  (filter: '{escape(listing.search_filter)}')"
    table = Table(title=title, box=box.SIMPLE_HEAVY, expand=False)
    table.add_column("Name", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")
    for entry in listing.visible:
        name = f"[cyan]{escape(entry.name)}/[/cyan]" if entry.is_dir else escape(entry.name)
        size = "" if entry.is_dir else _format_size(entry.size_bytes)
        table.add_row(name, size, entry.modified_at.strftime("%Y-%m-%d %H:%M"))
    console.print(table)
    console.print(
        f"[dim]{len(listing.visible)} of {len(listing.entries)} entries shown[/dim]"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docbrowser-cli",
        description="Browse and manage files under the document root (DOCBROWSER_ROOT).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print bare names instead of a table",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("ls", help="List a directory (root by default)")
    ls.add_argument("directory", nargs="?", default=None)
    ls.add_argument("--filter", default="", help="Case-insensitive name filter")

    cat = sub.add_parser("cat", help="Print a text file")
    cat.add_argument("path")

    write = sub.add_parser("write", help="Replace a file's content (stdin by default)")
    write.add_argument("path")
    write.add_argument("--text", default=None, help="Content to write instead of stdin")

    cp = sub.add_parser("cp", help="Duplicate an entry next to itself")
    cp.add_argument("path")

    mv = sub.add_parser("mv", help="Move an entry into a directory (root by default)")
    mv.add_argument("path")
    mv.add_argument("destination", nargs="?", default=None)

    rename = sub.add_parser("rename", help="Rename an entry inside its directory")
    rename.add_argument("path")
    rename.add_argument("new_name")

    rm = sub.add_parser("rm", help="Delete an entry (recursively for folders)")
    rm.add_argument("path")

    mkdir = sub.add_parser("mkdir", help="Create a folder")
    mkdir.add_argument("name", nargs="?", default="")
    mkdir.add_argument("--in", dest="parent", default=None, help="Parent directory")

    return parser


def _dispatch(store: FileStore, args: argparse.Namespace) -> OperationResult:
    if args.command == "ls":
        result = store.enter(args.directory) if args.directory else store.set_root()
        if result.ok and args.filter:
            result = store.set_filter(args.filter)
        return result
    if args.command == "cat":
        return store.read(args.path)
    if args.command == "write":
        content = args.text if args.text is not None else sys.stdin.read()
        return store.write(args.path, content)
    if args.command == "cp":
        return store.copy(args.path)
    if args.command == "mv":
        return store.move(args.path, args.destination)
    if args.command == "rename":
        return store.rename(args.path, args.new_name)
    if args.command == "rm":
        return store.delete(args.path)
    if args.command == "mkdir":
        if args.parent:
            entered = store.enter(args.parent)
            if not entered.ok:
                return entered
        return store.create_folder(args.name)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging("WARNING")

    console = Console(soft_wrap=True)
    err_console = Console(stderr=True)

    store = container.get_file_store()
    result = _dispatch(store, args)
    if not result.ok:
        err_console.print(f"[red]Error:[/red] {escape(result.message)}")
        return 1

    if args.command == "cat":
        sys.stdout.write(result.value)
    else:
        render_listing(console, result.listing, plain=args.plain)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
