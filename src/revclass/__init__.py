"""RevClass: Reversible Gate Classification Framework"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("revclass")
except (ImportError, PackageNotFoundError):
    __version__ = "0.0.0"
