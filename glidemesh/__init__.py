"""Wavefront OBJ/MTL mesh loading and Voodoo2-era register, DAC, video timing and clock helpers."""

__version__ = "0.1.0"
__all__ = ["model", "objfile", "registers", "dac", "videotiming", "clocks"]