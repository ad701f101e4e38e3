"""Catalog ingestion layer. Loads star records and builds renderable entities."""

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Iterable

import httpx

from starmap3d.compute import color_for_temperature, project, visual_attributes
from starmap3d.models import (
    CatalogData,
    Position3D,
    StarEntity,
    StarRecord,
    VisualAttributes,
)

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CATALOG = _ROOT / "resources" / "stars.json"

SUN_NAME = "Sun"
SUN_TEMPERATURE_K = 5778.0
SUN_RADIUS = 0.017

# JSON key -> StarRecord field
_FIELDS: dict[str, str] = {
    "ra": "ra_deg",
    "dec": "dec_deg",
    "distance_pc": "distance_pc",
    "luminosity": "luminosity",
    "estimated_temperature": "temperature_k",
}


class CatalogError(Exception):
    """Catalog could not be loaded or a record is malformed."""


def default_source() -> str:
    """Catalog location from STARMAP3D_CATALOG, else the bundled catalog."""
    return os.environ.get("STARMAP3D_CATALOG") or str(DEFAULT_CATALOG)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(url: str, client: httpx.Client | None) -> Any:
    try:
        if client is not None:
            resp = client.get(url, timeout=10)
        else:
            resp = httpx.get(url, timeout=10)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPError as e:
        raise CatalogError(f"Could not load {url}: {e}") from e
    except ValueError as e:
        raise CatalogError(f"Invalid JSON from {url}: {e}") from e


def _read(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogError(f"Could not load {path}: {e}") from e
    except ValueError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e


def parse_records(rows: Iterable[Any]) -> tuple[StarRecord, ...]:
    """Convert decoded JSON rows into StarRecords.

    Args:
        rows: Objects with name, ra, dec, distance_pc, luminosity and
            estimated_temperature keys.

    Returns:
        Tuple of StarRecord in input order.

    Raises:
        CatalogError: On a missing key, a non-string name, a non-numeric or
            non-finite value, or a negative distance/luminosity. The message
            names the offending row.
    """
    records: list[StarRecord] = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            raise CatalogError(f"row {i}: expected an object, got {type(row).__name__}")
        try:
            name = row["name"]
            values = {field: float(row[key]) for key, field in _FIELDS.items()}
        except KeyError as e:
            raise CatalogError(f"row {i}: missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise CatalogError(f"row {i} ({row.get('name')}): {e}") from e

        if not isinstance(name, str):
            raise CatalogError(f"row {i}: name must be a string, got {type(name).__name__}")
        for key, field in _FIELDS.items():
            if not math.isfinite(values[field]):
                raise CatalogError(f"row {i} ({name}): non-finite {key}")
        if values["distance_pc"] < 0:
            raise CatalogError(f"row {i} ({name}): negative distance_pc")
        if values["luminosity"] < 0:
            raise CatalogError(f"row {i} ({name}): negative luminosity")
        records.append(StarRecord(name=name, **values))
    return tuple(records)


def load_catalog(
    source: str | Path, client: httpx.Client | None = None
) -> tuple[StarRecord, ...]:
    """Load star records from a JSON file path or an http(s) URL.

    Args:
        source: Filesystem path or URL of a JSON array of star objects.
        client: Optional httpx client used for URL sources.

    Returns:
        Tuple of StarRecord.

    Raises:
        CatalogError: On I/O, HTTP, JSON or record errors.
    """
    source = str(source)
    logger.info("Loading catalog from %s", source)
    data = _fetch(source, client) if _is_url(source) else _read(source)
    if not isinstance(data, list):
        raise CatalogError(f"{source}: expected a JSON array, got {type(data).__name__}")
    records = parse_records(data)
    logger.info("Loaded %d stars from %s", len(records), source)
    return records


def build_entity(record: StarRecord) -> StarEntity:
    return StarEntity(
        name=record.name,
        distance_pc=record.distance_pc,
        position=project(record.ra_deg, record.dec_deg, record.distance_pc),
        visual=visual_attributes(record),
    )


def sun_entity() -> StarEntity:
    """The reference body at the origin. Distance 0 marks it for display."""
    return StarEntity(
        name=SUN_NAME,
        distance_pc=0.0,
        position=Position3D(0.0, 0.0, 0.0),
        visual=VisualAttributes(
            color=color_for_temperature(SUN_TEMPERATURE_K), radius=SUN_RADIUS
        ),
    )


def build_catalog(
    records: Iterable[StarRecord], source: str, include_sun: bool = True
) -> CatalogData:
    entities = [sun_entity()] if include_sun else []
    entities.extend(build_entity(r) for r in records)
    return CatalogData(source=source, entities=tuple(entities))


def run(
    source: str | Path | None = None,
    include_sun: bool = True,
    client: httpx.Client | None = None,
) -> CatalogData:
    """Top-level entry point: load a catalog and return renderable CatalogData.

    Args:
        source: Path or URL. Defaults to default_source().
        include_sun: Prepend the reference body at the origin.
        client: Optional httpx client for URL sources.

    Returns:
        Fully computed CatalogData.
    """
    src = str(source) if source is not None else default_source()
    records = load_catalog(src, client=client)
    return build_catalog(records, src, include_sun=include_sun)
