"""
Version of the installed darkthrone-api distribution.

Installed builds report the version recorded in package metadata; a source
checkout falls back to the VERSION file next to setup.py.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "darkthrone-api"


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "unknown"


__version__ = get_version()
