"""reprcheck infrastructure layer: front end and configuration files."""
