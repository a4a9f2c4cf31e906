"""grizzly - manage Grafana resources declaratively."""

__version__ = "0.1.0"
