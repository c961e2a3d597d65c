"""Version lookup for the installed enumgen distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "enumgen"
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """Return the installed version, or a placeholder when running from a checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
