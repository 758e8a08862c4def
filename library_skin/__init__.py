"""Library skin: page chrome for MediaWiki-style wikis."""
from library_skin._version import __version__

__all__ = ["__version__"]
