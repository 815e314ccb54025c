"""Geometric quality checks and metadata extraction for 3D room scans."""

__version__ = "0.1.0"
