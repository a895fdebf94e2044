"""go-vanity: static pages for Go vanity import paths."""

__version__ = "0.1.0"
