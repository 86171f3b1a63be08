"""reprcheck application layer.

Lint passes, attribute analysis, constant evaluation, fixes,
reporters and the services that tie them together.
"""
