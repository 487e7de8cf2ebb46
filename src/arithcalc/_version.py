"""Installed version of arithcalc, as recorded in the package metadata."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    # Running from a source tree without an install has no metadata
    try:
        return version("arithcalc")
    except PackageNotFoundError:
        return "0.0.0"
