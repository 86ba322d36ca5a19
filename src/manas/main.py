"""
Scrape the Manas canteen and buffet menus into JSON documents.

Run with: python -m src.manas.main [--only canteen] [--output-dir public] [--show]
"""
import argparse
import asyncio
import logging
import sys

from src.manas.config import ScraperConfig
from src.manas.loader.convert import buffet_json_to_model, canteen_json_to_model
from src.manas.loader.fetch import build_client
from src.manas.loader.load import Page, document_store, scrape_all

logging.basicConfig(level=logging.INFO)


def show_saved(config: ScraperConfig, pages: list[str]) -> None:
    """Print a readable summary of the stored documents."""
    if Page.canteen in pages:
        store = document_store(config, Page.canteen)
        menu, meta = canteen_json_to_model(store.load())
        foods = menu.foods_by_id
        print(f"Canteen ({store.path}, updated {meta.last_updated})")
        for day in menu.menus:
            print(f"- {day.date}")
            for food_id in day.items:
                food = foods.get(food_id)
                if food is None:
                    print(f"    {food_id} (missing from catalog)")
                    continue
                print(f"    {food.name.tr} | {food.calories_kcal} kcal")

    if Page.buffet in pages:
        store = document_store(config, Page.buffet)
        menu, meta = buffet_json_to_model(store.load())
        print(f"Buffet ({store.path}, updated {meta.last_updated})")
        for category in menu.categories:
            print(f"- {category.title} [{category.id}]")
            for item in category.items:
                print(f"    {item.name} | {item.price} {meta.currency}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape the Manas canteen and buffet menus into JSON",
        epilog="Examples:\n"
               "  %(prog)s\n"
               "  %(prog)s --only canteen --output-dir data\n"
               "  %(prog)s --freshness 6\n"
               "  %(prog)s --show",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--output-dir", default=None, help="Directory for the JSON documents (default: public)")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: 30)")
    parser.add_argument("--only", choices=list(Page.all), default=None, help="Scrape a single page")
    parser.add_argument(
        "--freshness",
        type=float,
        default=0,
        help="Skip pages whose stored document is newer than this many hours (default: 0, always scrape)",
    )
    parser.add_argument("--show", action="store_true", help="Print the stored documents instead of scraping")
    return parser


def config_from_args(args: argparse.Namespace) -> ScraperConfig:
    overrides = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.timeout is not None:
        overrides["timeout_sec"] = args.timeout
    return ScraperConfig(**overrides)


async def run(config: ScraperConfig, freshness_hours: float, pages: list[str]) -> list[str]:
    async with build_client(config) as client:
        return await scrape_all(client, config, freshness_hours=freshness_hours, only=pages)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    pages = [args.only] if args.only else list(Page.all)

    try:
        if args.show:
            show_saved(config, pages)
            return 0
        written = asyncio.run(run(config, args.freshness, pages))
    except Exception as exc:
        logging.error("Menu scrape failed: %s", exc)
        return 1

    if written:
        print(f"OK: wrote {' and '.join(written)}")
    else:
        print("OK: stored documents are up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
