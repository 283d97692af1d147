"""leakscan package metadata."""
import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("leakscan")
except PackageNotFoundError:
    __version__ = "0.3.0"

# Library use stays quiet unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
