"""reprcheck presentation layer: command line interface."""
