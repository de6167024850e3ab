"""
bybit-wire command line.

Decodes a saved exchange payload against one of the wire models and prints
the result, or the mapping error, to the terminal:

  bybit-wire models                              # list decodable types
  bybit-wire decode BatchPlaceResponse resp.json
  bybit-wire decode WalletList resp.json --result --table
  cat tick.json | bybit-wire decode WsTickerSnapshot -
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from . import models
from .exchanges import BybitAPIError, ResponseDecodeError, decode_response, decode_result
from .models import ListEnvelope, MappingError
from .models import responses
from .utils.frames import to_dataframe

console = Console()


def model_registry() -> dict:
    """Every concrete wire model reachable by name, response aliases included."""
    registry = {}
    for module in (models, responses):
        for name, obj in vars(module).items():
            if name.startswith("_"):
                continue
            if isinstance(obj, type) and issubclass(obj, BaseModel):
                registry[name] = obj
    return registry


def _add_to_tree(parent: Tree, value) -> None:
    if isinstance(value, BaseModel):
        for name, field_value in value:
            if isinstance(field_value, (BaseModel, list)):
                _add_to_tree(parent.add(f"[bold cyan]{name}[/]"), field_value)
            else:
                parent.add(f"[cyan]{name}[/]: {_display(field_value)}")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _add_to_tree(parent.add(f"[dim][{index}][/]"), item)
    else:
        parent.add(_display(value))


def _display(value) -> str:
    if value is None:
        return "[dim]-[/]"
    return escape(str(value))


def _find_list(decoded: BaseModel) -> Optional[ListEnvelope]:
    if isinstance(decoded, ListEnvelope):
        return decoded
    result = getattr(decoded, "result", None)
    if isinstance(result, ListEnvelope):
        return result
    return None


def print_model(decoded: BaseModel) -> None:
    tree = Tree(f"[bold magenta]{escape(type(decoded).__name__)}[/]")
    _add_to_tree(tree, decoded)
    console.print(tree)


def print_table(envelope: ListEnvelope, title: str) -> None:
    df = to_dataframe(envelope, as_float=False)
    table = Table(show_header=True, header_style="bold magenta", title=title)
    if df.empty:
        console.print(Panel("[dim]no rows[/]", title=title, border_style="cyan"))
        return
    for col in df.columns:
        table.add_column(str(col))
    for row in df.itertuples(index=False):
        table.add_row(*(_display(v) for v in row))
    console.print(table)


def print_error(message: str, details: str = None) -> None:
    text = f"[bold red]{escape(message)}[/]"
    if details:
        text += f"\n[dim]{escape(details)}[/]"
    console.print(Panel(text, border_style="red", title="[bold red]ERROR[/]", padding=(1, 2)))


def _read_payload(source: str):
    raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    return json.loads(raw, parse_float=Decimal)


def cmd_models(args) -> int:
    table = Table(show_header=True, header_style="bold magenta", title="Wire models")
    table.add_column("Name", style="bold yellow")
    table.add_column("Fields", justify="right", style="cyan")
    for name, model in sorted(model_registry().items()):
        table.add_row(name, str(len(model.model_fields)))
    console.print(table)
    return 0


def cmd_decode(args) -> int:
    model = model_registry().get(args.model)
    if model is None:
        print_error(f"Unknown model: {args.model}", "run 'bybit-wire models' to list them")
        return 2

    try:
        payload = _read_payload(args.source)
    except (OSError, json.JSONDecodeError) as e:
        print_error(f"Cannot read {args.source}", str(e))
        return 1

    decoder = decode_result if args.result else decode_response
    try:
        decoded = decoder(model, payload, endpoint=args.source)
    except BybitAPIError as e:
        print_error(f"retCode {e.code}", e.message)
        return 1
    except ResponseDecodeError as e:
        print_error(f"Payload does not match {e.model}", str(e.error))
        return 1
    except MappingError as e:
        print_error("Payload is not a JSON object", str(e))
        return 1

    envelope = _find_list(decoded) if args.table else None
    if envelope is not None:
        print_table(envelope, escape(type(decoded).__name__))
    else:
        print_model(decoded)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bybit-wire",
        description="Decode Bybit V5 payloads with the bybit_wire models",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    models_parser = subparsers.add_parser("models", help="List decodable model names")
    models_parser.set_defaults(func=cmd_models)

    decode_parser = subparsers.add_parser("decode", help="Decode a JSON payload")
    decode_parser.add_argument("model", help="Model name, e.g. BatchPlaceResponse")
    decode_parser.add_argument("source", help="JSON file, or - for stdin")
    decode_parser.add_argument(
        "--result", action="store_true",
        help="Decode only the 'result' member of a full response",
    )
    decode_parser.add_argument(
        "--table", action="store_true",
        help="Render list results as a table",
    )
    decode_parser.set_defaults(func=cmd_decode)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
