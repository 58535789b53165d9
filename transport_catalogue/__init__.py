"""Transport catalogue: bus route statistics, SVG maps and journey routing from JSON requests."""

__version__ = "1.0.0"