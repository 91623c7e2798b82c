"""GridCab - console taxi dispatch simulation."""

__version__ = "0.1.0"
