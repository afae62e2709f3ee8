"""F1 Stats backend: normalized F1 data and driver portraits for the web front-end"""

__version__ = "1.0.0"
