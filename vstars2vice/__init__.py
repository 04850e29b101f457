"""vSTARS to vice video map converter.

Reads a vSTARS facility XML file, extracts the line segments of every
video map, and writes a vice-format JSON file keyed by map name with
each endpoint rendered as a DMS coordinate token.
"""

__version__ = "0.1.0"
