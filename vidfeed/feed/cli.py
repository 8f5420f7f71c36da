"""CLI for browsing the video feed page by page."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Callable, Iterable, Optional

from vidfeed.client.http_client import SearchApiClient
from vidfeed.config.logging_config import setup_logging
from vidfeed.config.settings import get_settings
from vidfeed.feed.controller import FeedController
from vidfeed.feed.errors import PageUnreachable
from vidfeed.feed.result import FeedResult, NavigationState, PresentationState

logger = logging.getLogger(__name__)

HELP_TEXT = "n=next  p=prev  <number>=go to page  c <category>=switch  r=retry  q=quit"


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="Browse video search results by category.")
    parser.add_argument("--category", default=None, help="Category to start on (default: All).")
    parser.add_argument(
        "--pages",
        type=int,
        default=None,
        help="Print this many pages non-interactively and exit.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def render_result(result: FeedResult) -> list[str]:
    """Lines describing the items, error or empty state of *result*."""
    state = result.state
    if state is PresentationState.LOADING:
        return ["Loading..."]
    if state is PresentationState.ERROR:
        return ["Error loading videos", f"  {result.error}"]
    if state is PresentationState.EMPTY:
        return ["No videos found", "  Try selecting a different category"]
    return [
        f"{i:>2}. {item.title} [{item.channel_title}] https://youtu.be/{item.id}"
        for i, item in enumerate(result.items, start=1)
    ]


def render_pager(nav: NavigationState, radius: int = 1) -> str:
    """One-line pagination bar, e.g. ``< Prev  1 ... 4 [5] 6 ... 9  Next >``."""
    parts = ["< Prev" if nav.has_previous else "  ----"]
    for page in nav.visible_pages(radius):
        if page is None:
            parts.append("...")
        elif page == nav.current_page:
            parts.append(f"[{page}]")
        else:
            parts.append(str(page))
    parts.append("Next >" if nav.has_next else "----  ")
    return f"{nav.category.label}: " + "  ".join(parts)


def _show(controller: FeedController, out: Callable[[str], None], radius: int) -> None:
    for line in render_result(controller.current_result()):
        out(line)
    out(render_pager(controller.navigation, radius))


async def run_commands(
    controller: FeedController,
    commands: Iterable[str],
    out: Callable[[str], None] = print,
    radius: int = 1,
) -> None:
    """Apply browse commands in order, printing the feed after each one."""
    await controller.wait_idle()
    _show(controller, out, radius)

    for raw in commands:
        command = raw.strip()
        if not command:
            continue
        if command == "q":
            break
        nav = controller.navigation
        try:
            if command == "n":
                if not nav.has_next:
                    out("Already on the last page")
                    continue
                controller.go_to_page(nav.current_page + 1)
            elif command == "p":
                if not nav.has_previous:
                    out("Already on the first page")
                    continue
                controller.go_to_page(nav.current_page - 1)
            elif command == "r":
                controller.retry()
            elif command.startswith("c "):
                controller.set_category(command[2:])
            elif command.isdigit():
                controller.go_to_page(int(command))
            else:
                out(HELP_TEXT)
                continue
        except PageUnreachable as exc:
            out(str(exc))
            continue
        except KeyError as exc:
            out(str(exc.args[0]) if exc.args else "Unknown category")
            continue

        await controller.wait_idle()
        _show(controller, out, radius)


def _stdin_commands() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


async def _browse(args: argparse.Namespace) -> None:
    settings = get_settings()
    controller = FeedController(SearchApiClient(settings.api), settings=settings.feed)
    if args.category:
        if controller.set_category(args.category) is None:
            controller.start()
    else:
        controller.start()

    if args.pages is not None:
        commands: Iterable[str] = ["n"] * max(0, args.pages - 1)
    else:
        print(HELP_TEXT)
        commands = _stdin_commands()
    await run_commands(controller, commands, radius=settings.feed.window_radius)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the browser CLI."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    settings.ensure_dirs()
    setup_logging(log_path=settings.logs_dir / "vidfeed.log", debug=args.debug)

    try:
        asyncio.run(_browse(args))
    except KeyError as exc:
        logger.error("%s", exc.args[0] if exc.args else exc)
        return 1
    except Exception as exc:
        logger.exception("Browse session failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
