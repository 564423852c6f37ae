"""Small utilities: ranges, integer conversion, locks, heaps, results, random strings and a Stable Diffusion config and client."""

__version__ = "0.1.0"