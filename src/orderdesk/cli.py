"""CLI entrypoint for orderdesk."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from orderdesk.api.export import export_orders
from orderdesk.api.orders_api import get_orders_page
from orderdesk.config.loader import DisplaySettings, get_display_settings, load_config_or_defaults
from orderdesk.ingestion.file_ingestor import load_draft_from_json, load_order_records
from orderdesk.orders.form import OrderValidationError, build_payload, draft_from_record
from orderdesk.orders.models import OrderRecord
from orderdesk.output.order_table import render_json, render_markdown
from orderdesk.query.models import SORT_KEYS, QueryDescriptor
from orderdesk.temporal.display import to_display_text
from orderdesk.temporal.models import classify_date
from orderdesk.temporal.normalizer import to_editable_text, to_instant, to_wire_text
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)


def _load_settings(args: argparse.Namespace) -> DisplaySettings:
    config_path = Path(args.config) if getattr(args, "config", None) else None
    return get_display_settings(load_config_or_defaults(config_path))


def _descriptor_from_args(args: argparse.Namespace, settings: DisplaySettings) -> QueryDescriptor:
    return QueryDescriptor(
        search_term=args.search or "",
        sort_key=args.sort_key,
        sort_direction=args.direction,
        page_number=args.page,
        page_size=args.page_size or settings.page_size,
    )


def _parse_date_argument(raw: str) -> Any:
    """Numbers and JSON objects are read as such; anything else is text."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if isinstance(value, (int, float, dict)) and not isinstance(value, bool):
        return value
    return raw


def cmd_list(args: argparse.Namespace) -> None:
    """Show one page of orders from a JSON file."""
    settings = _load_settings(args)
    records = load_order_records(Path(args.file))
    page = get_orders_page(records, _descriptor_from_args(args, settings), settings)

    if args.format == "json":
        print(render_json(page))
    else:
        print(render_markdown(page))


def cmd_export(args: argparse.Namespace) -> None:
    """Export one page of orders as JSON or CSV."""
    settings = _load_settings(args)
    records = load_order_records(Path(args.file))
    out = Path(args.out) if args.out else None
    print(
        export_orders(
            records,
            _descriptor_from_args(args, settings),
            settings,
            format=args.format,
            out=out,
        )
    )


def cmd_date(args: argparse.Namespace) -> None:
    """Show how an order date value normalizes and displays."""
    value = _parse_date_argument(args.value)
    instant = to_instant(value)
    result = {
        "kind": classify_date(value).kind,
        "editable": to_editable_text(instant),
        "wire": to_wire_text(instant),
        "display": to_display_text(value),
    }
    if args.json:
        print(json.dumps(result, indent=2))
        return
    for key, text in result.items():
        print(f"{key:<10} {text}")


def cmd_payload(args: argparse.Namespace) -> None:
    """Validate an order (as the edit form would) and print the API payload."""
    record = OrderRecord.model_validate(load_draft_from_json(Path(args.file)))
    if record.is_new:
        logger.info(f"No order id in {args.file}; payload creates a new order")
    else:
        logger.info(f"Building update payload for order {record.id}")
    draft = draft_from_record(record)
    try:
        payload = build_payload(draft)
    except OrderValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(json.dumps(payload.to_wire(), indent=2, ensure_ascii=False))


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", type=str, help="JSON file with an array of orders")
    parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Filter by id, customer, product, status, date or price",
    )
    parser.add_argument(
        "--sort-key",
        type=str,
        choices=list(SORT_KEYS),
        default="id",
        help="Column to sort by (default: id)",
    )
    parser.add_argument(
        "--direction",
        type=str,
        choices=["asc", "desc"],
        default="asc",
        help="Sort direction (default: asc)",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number, clamped to the available pages (default: 1)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Orders per page (default: from config, 5)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to orderdesk config YAML (default: ./orderdesk.config.yaml if present)",
    )


def main() -> None:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="orderdesk",
        description="Browse, search and validate orders from the orders API",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    list_parser = subparsers.add_parser("list", help="Show a page of orders")
    _add_query_arguments(list_parser)
    list_parser.add_argument(
        "--format",
        type=str,
        choices=["md", "json"],
        default="md",
        help="Output format: md or json (default: md)",
    )
    list_parser.set_defaults(func=cmd_list)

    # export command
    export_parser = subparsers.add_parser("export", help="Export a page of orders")
    _add_query_arguments(export_parser)
    export_parser.add_argument(
        "--format",
        type=str,
        choices=["json", "csv"],
        default="json",
        help="Export format: json or csv (default: json)",
    )
    export_parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Write to this file instead of stdout",
    )
    export_parser.set_defaults(func=cmd_export)

    # date command
    date_parser = subparsers.add_parser("date", help="Normalize an order date value")
    date_parser.add_argument(
        "value",
        type=str,
        help="Date text, epoch number, or JSON object such as '{\"Y\": 2024, \"m\": 3, \"d\": 5}'",
    )
    date_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    date_parser.set_defaults(func=cmd_date)

    # payload command
    payload_parser = subparsers.add_parser("payload", help="Validate an order and print its API payload")
    payload_parser.add_argument("file", type=str, help="JSON file with one order object")
    payload_parser.set_defaults(func=cmd_payload)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
