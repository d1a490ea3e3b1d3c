"""Helpers shared by the stringkit CLI commands."""

from .mapping_parser import parse_mapping_pairs
from .messages import error, success, warn

__all__ = ["error", "parse_mapping_pairs", "success", "warn"]
