"""Command-line interface for pin maps."""

import logging
from pathlib import Path
from typing import Any, Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .assets import AssetError, get_default_assets
from .config import get_config
from .models.coordinate import Coordinate
from .models.crop import CropOption
from .pins import place_pins
from .utils.geo_utils import get_projection
from .utils.image_utils import load_image, save_image

console = Console()


def _coordinate_from_entry(entry: Any, index: int) -> Coordinate:
    if isinstance(entry, dict):
        return Coordinate(latitude=entry.get("latitude"), longitude=entry.get("longitude"))
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return Coordinate(latitude=entry[0], longitude=entry[1])
    if isinstance(entry, str):
        return Coordinate.parse(entry)
    raise ValueError(f"Pin #{index}: expected mapping, [lat, lon] pair or 'LAT,LON' string")


def load_pins_file(path: Path) -> list[Coordinate]:
    """Load coordinates from a YAML list (optionally under a ``pins`` key)."""
    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if isinstance(raw, dict):
        raw = raw.get("pins")
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of pins")
    return [_coordinate_from_entry(entry, i) for i, entry in enumerate(raw)]


def _parse_pin(ctx, param, values: tuple[str, ...]) -> list[Coordinate]:
    try:
        return [Coordinate.parse(v) for v in values]
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Pin Map - put coordinates onto a world map image."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@main.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--pin", "-p", "pin_values", multiple=True, callback=_parse_pin,
              help="Coordinate as LAT,LON (repeatable)")
@click.option("--pins-file", type=click.Path(exists=True, dir_okay=False),
              help="YAML file with a list of pins")
@click.option("--crop/--no-crop", default=False, help="Crop around the pins")
@click.option("--bound", type=int, default=None, help="Crop margin around pins in pixels")
@click.option("--min-width", type=int, default=None, help="Minimum crop width")
@click.option("--min-height", type=int, default=None, help="Minimum crop height")
@click.option("--preserve-ratio/--no-preserve-ratio", default=None,
              help="Keep the min width:height ratio when the crop grows")
@click.option("--projection", default=None, help="Projection of the map (mercator, equirectangular)")
@click.option("--map", "map_path", type=click.Path(exists=True, dir_okay=False),
              help="World map image to use instead of the default")
@click.option("--pin-part", "pin_part_paths", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Pin part image, bottom layer first (repeatable)")
def render(
    output: str,
    pin_values: list[Coordinate],
    pins_file: Optional[str],
    crop: bool,
    bound: Optional[int],
    min_width: Optional[int],
    min_height: Optional[int],
    preserve_ratio: Optional[bool],
    projection: Optional[str],
    map_path: Optional[str],
    pin_part_paths: tuple[str, ...],
):
    """Render pins onto a world map and save the image to OUTPUT."""
    config = get_config()
    assets = get_default_assets()

    try:
        coords = list(pin_values)
        if pins_file:
            coords.extend(load_pins_file(Path(pins_file)))
        proj = get_projection(projection or config.projection)

        world_map = load_image(map_path) if map_path else assets.world_map()
        pin_parts = [load_image(p) for p in pin_part_paths] if pin_part_paths else list(assets.pin_parts())

        crop_option = None
        if crop:
            crop_option = _build_crop(world_map.size, bound, min_width, min_height, preserve_ratio)
    except (ValueError, OSError, AssetError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    if not coords:
        console.print("[yellow]Warning:[/yellow] no pins given, rendering the bare map")

    image = place_pins(proj, world_map, pin_parts, coords, crop_option)

    output_path = Path(output)
    save_image(image, output_path)
    console.print(f"[green]Saved:[/green] {output_path}")
    console.print(f"[dim]{image.width} x {image.height} px, {len(coords)} pins[/dim]")


def _build_crop(
    map_size: tuple[int, int],
    bound: Optional[int],
    min_width: Optional[int],
    min_height: Optional[int],
    preserve_ratio: Optional[bool],
) -> CropOption:
    """Standard crop for the map size, with any explicit overrides applied."""
    width, height = map_size
    min_width = min_width if min_width is not None else max(width // 3, 1)
    min_height = min_height if min_height is not None else max(height // 3, 1)
    if preserve_ratio is None:
        preserve_ratio = min_height < min_width
    try:
        return CropOption(
            bound=bound if bound is not None else get_config().standard_crop_bound,
            min_width=min_width,
            min_height=min_height,
            preserve_ratio=preserve_ratio,
        )
    except ValidationError as exc:
        errors = "; ".join(err["msg"] for err in exc.errors())
        raise ValueError(f"Invalid crop options: {errors}") from exc


@main.command()
@click.argument("coordinate")
@click.option("--projection", default=None, help="Projection name")
def project(coordinate: str, projection: Optional[str]):
    """Print the pixel position of COORDINATE (LAT,LON) on the default map."""
    try:
        coord = Coordinate.parse(coordinate)
        proj = get_projection(projection or get_config().projection)
        width, height = get_default_assets().world_map().size
    except (ValueError, AssetError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    point = proj.convert(coord, width, height)
    console.print(f"{point.x} {point.y}")


@main.command()
def info():
    """Show the default assets and standard crop."""
    assets = get_default_assets()
    try:
        world_map = assets.world_map()
        parts = assets.pin_parts()
        crop = assets.standard_crop()
    except AssetError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    table = Table(title="Pin Map Defaults")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Map size", f"{world_map.width} x {world_map.height}")
    table.add_row("Pin parts", ", ".join(f"{p.width}x{p.height}" for p in parts))
    table.add_row("Crop bound", str(crop.bound))
    table.add_row("Crop minimum", f"{crop.min_width} x {crop.min_height}")
    table.add_row("Preserve ratio", "yes" if crop.preserve_ratio else "no")
    table.add_row("Projection", get_config().projection)
    console.print(table)


if __name__ == "__main__":
    main()
