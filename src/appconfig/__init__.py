"""appconfig: validated, environment-derived configuration for a web service."""

from importlib import metadata


def _project_version() -> str:
    """Resolve the project version from package metadata."""
    try:
        return metadata.version("appconfig")
    except metadata.PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _project_version()
