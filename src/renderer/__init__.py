"""Radiance estimation and the CPU accumulation loop."""
