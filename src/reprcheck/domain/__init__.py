"""reprcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc
"""
