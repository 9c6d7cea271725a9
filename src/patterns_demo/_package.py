"""Package metadata and naming constants."""

PACKAGE_NAME = "patterns-demo"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Repository, resource, factory, strategy and action patterns over an order domain"
