"""Command-line interface for browsing and exporting rushing statistics."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace
from pathlib import Path

from rushstats.client import PlayersClient
from rushstats.config import PAGE_SIZE_OPTIONS, iter_columns, load_settings, sortable_keys
from rushstats.controller import DashboardController
from rushstats.export import DirectoryDownloader


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse NFL rushing statistics")
    parser.add_argument("--base-url", default=None, help="Players API base URL (overrides RUSHSTATS_API_URL)")
    parser.add_argument("--search", default="", help="Filter players by name")
    parser.add_argument("--page", type=int, default=1, help="Page to display")
    parser.add_argument(
        "--entries",
        type=int,
        choices=PAGE_SIZE_OPTIONS,
        default=None,
        help="Entries per page",
    )
    parser.add_argument("--sort", choices=sortable_keys(), default=None, help="Column to sort the page by")
    parser.add_argument("--ascending", action="store_true", help="Sort smallest values first")
    parser.add_argument("--export", type=Path, default=None, help="Directory to save the CSV export in")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def _render_table(controller: DashboardController) -> str:
    columns = list(iter_columns())
    headers = []
    for column in columns:
        indicator = controller.sort_indicator(column.key)
        headers.append(f"{column.label} {indicator}" if indicator else column.label)
    rows = [
        ["" if record.get(column.key) is None else str(record.get(column.key)) for column in columns]
        for record in controller.sorted_records
    ]
    widths = [
        max([len(header)] + [len(row[idx]) for row in rows])
        for idx, header in enumerate(headers)
    ]
    lines = ["  ".join(header.ljust(width) for header, width in zip(headers, widths))]
    lines.append("  ".join("-" * width for width in widths))
    for row in rows:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
    return "\n".join(lines)


async def _run(args: argparse.Namespace) -> int:
    settings = load_settings()
    if args.base_url:
        settings = replace(settings, api_url=args.base_url.rstrip("/"))

    downloader = DirectoryDownloader(args.export) if args.export else None

    async with PlayersClient(settings) as client:
        controller = DashboardController(client, settings=settings, downloader=downloader)
        controller.start(page_size=args.entries, search=args.search or None)
        await controller.wait_idle()

        while controller.pagination.current_page < args.page and controller.has_next:
            controller.next_page()
            await controller.wait_idle()

        controller.dispose()

        if controller.state.error:
            print(f"Failed to load players: {controller.state.error}")
            return 1

        if args.sort:
            controller.toggle_sort(args.sort)
            if args.ascending:
                controller.toggle_sort(args.sort)

        print(_render_table(controller))
        pagination = controller.pagination
        print(
            f"\nPage {pagination.current_page} of {pagination.max_page}"
            f" | previous: {'yes' if controller.has_prev else 'no'}"
            f" | next: {'yes' if controller.has_next else 'no'}"
        )

        if args.export:
            export = controller.export()
            if export is None:
                print("Nothing to export")
            else:
                print(f"Wrote {len(export.records)} rows to {args.export / export.filename}")
    return 0


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    raise SystemExit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
