"""Shell runtime utilities: errors, parsing, paths, logging, containers and signals."""

__version__ = "0.1.0"