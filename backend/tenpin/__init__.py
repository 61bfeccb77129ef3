"""Ten-pin bowling score tracker."""

__version__ = "0.1.0"
