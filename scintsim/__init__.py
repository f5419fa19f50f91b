"""Photon tracing in convex scintillator tiles, spectrum fitting, and two small console tools."""

__version__ = "0.1.0"