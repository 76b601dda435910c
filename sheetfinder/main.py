import argparse
import asyncio
import sys

from sheetfinder.config.settings import Settings
from sheetfinder.finder.controller import FinderController, build_controller
from sheetfinder.finder.exceptions import MissingSourceError
from sheetfinder.finder.state import SyncStatus
from sheetfinder.logging.logger import Log


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Search a published spreadsheet (TSV).")
    ap.add_argument("search", nargs="?", default="", help="free-text search terms")
    ap.add_argument(
        "--filter",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="exact-match filter on a column; repeatable",
    )
    ap.add_argument("--page", type=int, default=1)
    ap.add_argument("--refresh", action="store_true", help="ignore a fresh cache")
    return ap.parse_args(argv)


async def run(controller: FinderController, args: argparse.Namespace) -> SyncStatus:
    status = await (controller.refresh(force=True) if args.refresh else controller.load())

    controller.set_search(args.search)
    for item in args.filter:
        key, _, value = item.partition("=")
        controller.set_filter(key.strip(), value.strip())
    result = controller.set_page(args.page)

    print("\t".join(controller.labels))
    for record in result.page_records:
        print(record.to_tsv_line(controller.labels))
    print(
        f"-- {result.total_matched} of {len(controller.records)} records, "
        f"page {result.page}/{result.total_pages} ({status.value})",
        file=sys.stderr,
    )
    for definition in controller.filter_definitions:
        print(f"   {definition.label}: {len(definition.values)} values", file=sys.stderr)
    return status


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> controller -> load -> print one page."""
    settings = Settings()
    Log.configure(settings.log_level, settings.app_env)
    args = parse_args(argv)

    controller = build_controller(settings)
    try:
        status = asyncio.run(run(controller, args))
    except MissingSourceError as exc:
        Log.error(f"{exc}; set TSV_URL in the environment or .env")
        return 2
    return 1 if status is SyncStatus.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
