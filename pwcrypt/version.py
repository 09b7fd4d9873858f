"""Version resolution for package metadata and runtime engine version."""

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _package_version

from .main import pwcrypt


_engine_version = str(getattr(pwcrypt, "ENGINE_VERSION", "")).strip()
if _engine_version and _engine_version.lower() != "unknown":
    __version__ = _engine_version
else:
    try:
        __version__ = _package_version("pwcrypt")
    except _PackageNotFoundError:
        __version__ = "0.0.0"


__all__ = ["__version__"]
