"""Generate a Markdown licenses report from a Composer lock file."""

__version__ = "0.1.0"
