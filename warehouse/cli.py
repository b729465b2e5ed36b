"""CLI interface for inspecting product lists with an in-memory catalog."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from .catalog import open_catalog
from .category import Category
from .config import WarehouseSettings, get_settings
from .errors import WarehouseError
from .protocol import ProductStore

app = typer.Typer(help="In-memory product catalog tools")

logger = logging.getLogger(__name__)


def setup_logging(settings: WarehouseSettings) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    logger.debug(f"Logging configured at {settings.log_level} level")


def load_products(store: ProductStore, items: list[dict[str, Any]]) -> int:
    """Add every item of a decoded JSON product list to ``store``."""
    assert isinstance(store, ProductStore)
    if not isinstance(items, list):
        raise typer.BadParameter("expected a JSON array of products")

    for item in items:
        if not isinstance(item, dict):
            raise typer.BadParameter(f"expected a product object, got {item!r}")
        store.add_product(
            item.get("id"),
            item.get("name"),
            item.get("category"),
            item.get("price"),
        )
    return len(items)


def _read_catalog(path: Path):
    try:
        with open(path) as f:
            items = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Error: Could not read '{path}': {e}", err=True)
        raise typer.Exit(1)

    catalog = open_catalog()
    try:
        count = load_products(catalog, items)
    except (WarehouseError, ValidationError, typer.BadParameter) as e:
        typer.echo(f"Error: Invalid product in '{path}': {e}", err=True)
        raise typer.Exit(1)

    logger.info(f"Loaded {count} products from {path}")
    return catalog


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override the configured logging level.",
    ),
):
    """Load product lists into a catalog and report on them."""
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = get_settings(**overrides)
    except ValidationError as e:
        typer.echo(f"Error: Invalid settings: {e}", err=True)
        raise typer.Exit(1)
    setup_logging(settings)


@app.command()
def group(
    path: Path = typer.Argument(..., help="JSON file holding a list of products."),
    category: str | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Only report products in this category.",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path. If not specified, prints to stdout.",
    ),
):
    """Print products grouped by category as JSON."""
    catalog = _read_catalog(path)

    if category is None:
        groups = catalog.group_by_category()
    else:
        selected = Category.of(category)
        groups = {selected: catalog.find_by_category(selected)}

    json_data = json.dumps(
        [
            {
                "category": cat.name,
                "products": [
                    product.model_dump(mode="json", exclude={"category"})
                    for product in products
                ],
            }
            for cat, products in groups.items()
        ],
        indent=2,
    )

    if output:
        with open(output, "w") as f:
            f.write(json_data)
        typer.echo(f"Results saved to {output}", err=True)
    else:
        typer.echo(json_data)


@app.command()
def categories(
    path: Path = typer.Argument(..., help="JSON file holding a list of products."),
):
    """List the categories used by a product list."""
    catalog = _read_catalog(path)
    for cat in catalog.group_by_category():
        typer.echo(cat.name)


if __name__ == "__main__":
    app()
