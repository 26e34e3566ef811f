"""hREA Docs - GraphQL API reference generator for hREA."""

from .core.constants import VERSION

__version__ = VERSION
