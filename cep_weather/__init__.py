"""CEP Weather API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cep-weather")
except PackageNotFoundError:
    __version__ = "dev"
