"""Interactive Mandelbrot set explorer: plane geometry, plotting and a pygame window."""

__version__ = "0.1.0"
__all__ = ["plane", "mandelbrot", "app"]