"""Terminal reporting for fabriclaunch."""

from .filters import filter_patterns, pattern_matches
from .stdout import StdoutReporter

__all__ = ["StdoutReporter", "filter_patterns", "pattern_matches"]
