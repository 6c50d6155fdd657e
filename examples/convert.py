# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "celestjax"]
#
# [tool.uv.sources]
# celestjax = { path = ".." }
# ///
"""Convert a sky direction between coordinate systems.

Reads a latitude/longitude pair in degrees, converts it from one frame to
another with ``CoordConverter``, and prints the result.  When the target is
the horizontal frame the observer's latitude and local sidereal time are
used to build the local horizon.

Requires celestjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert.py LAT LON [OPTIONS]

Examples:
    # Summer solstice point of the ecliptic to equatorial coordinates
    uv run examples/convert.py 0 90 --source ecliptic-of-date --target equator-of-date

    # Galactic coordinates of the north celestial pole
    uv run examples/convert.py 90 0 --target galactic

    # Altitude and azimuth of Vega from 52°N at LST 18h30m
    uv run examples/convert.py 38.78 279.23 --target horizontal --latitude 52 --lst 277.5

    # Where the ecliptic crosses the 20° parallel of declination
    uv run examples/convert.py 0 0 --crossings 20
"""

import enum
import math
import sys
from typing import Annotated

import jax.numpy as jnp
import typer

from celestjax import (
    ERROR_TAG,
    AstroModel,
    CoordConverter,
    CoordinateSystem,
    GreatCircle,
    LatLong,
    set_dtype,
)

set_dtype(jnp.float64)


class Frame(enum.StrEnum):
    """Coordinate system of a direction."""

    equator_of_date = "equator-of-date"
    ecliptic_of_date = "ecliptic-of-date"
    galactic = "galactic"
    horizontal = "horizontal"

    @property
    def tag(self) -> CoordinateSystem:
        return CoordinateSystem[self.name.upper()]


def main(
    lat: Annotated[float, typer.Argument(help="Latitude of the direction in degrees")],
    lon: Annotated[float, typer.Argument(help="Longitude of the direction in degrees")],
    source: Annotated[Frame, typer.Option(help="Frame of the input direction")] = Frame.equator_of_date,
    target: Annotated[Frame, typer.Option(help="Frame to convert to")] = Frame.ecliptic_of_date,
    year: Annotated[float, typer.Option(help="Julian year of the epoch")] = 2000.0,
    latitude: Annotated[float, typer.Option(help="Observer latitude in degrees")] = 0.0,
    lst: Annotated[float, typer.Option(help="Local sidereal time in degrees")] = 0.0,
    crossings: Annotated[
        float | None,
        typer.Option(help="Also list where the ecliptic crosses this declination (degrees)"),
    ] = None,
) -> None:
    """Convert a direction and print it in the target frame."""
    model = AstroModel(
        year=year,
        latitude=math.radians(latitude),
        local_sidereal_time=math.radians(lst),
    )
    converter = CoordConverter(model)

    n = LatLong.from_degrees(source.tag, lat, lon)
    out = converter.convert_to(n, target.tag)
    if out.tag == ERROR_TAG:
        print(f"No conversion from {source.value} to {target.value}", file=sys.stderr)
        raise typer.Exit(code=1)

    out_lat, out_lon = out.to_degrees()
    print(f"obliquity : {math.degrees(float(model.obliquity())):.6f} deg")
    print(f"{source.value:>17}: lat {lat:+10.5f}  lon {lon % 360.0:10.5f}")
    print(f"{target.value:>17}: lat {float(out_lat):+10.5f}  lon {float(out_lon) % 360.0:10.5f}")

    if crossings is not None:
        # Ecliptic plane in equatorial coordinates, P0 at the vernal equinox
        ecliptic = GreatCircle(
            converter.ecl_to_equ(LatLong(CoordinateSystem.ECLIPTIC_OF_DATE, 0.0, 0.0)),
            converter.ecl_to_equ(LatLong(CoordinateSystem.ECLIPTIC_OF_DATE, 0.0, math.pi / 2)),
        )
        ras = ecliptic.parallel_cross(math.radians(crossings))
        if not ras:
            print(f"The ecliptic does not reach declination {crossings:+.3f} deg")
        for ra in ras:
            print(f"ecliptic at dec {crossings:+.3f}: RA {math.degrees(ra) % 360.0:10.5f} deg")


if __name__ == "__main__":
    typer.run(main)
