from importlib.metadata import PackageNotFoundError, version

try:
    # Change here if project is renamed and does not equal the distribution name
    __version__ = version("balance-schema")
except PackageNotFoundError:
    __version__ = "version-unavailable"
