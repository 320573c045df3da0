"""Mandelbrot set escape-time engines, ASCII and window viewers, and comparison tools."""

__version__ = "0.1.0"