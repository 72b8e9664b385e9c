"""Numeric building blocks shared by the tracer: vectors, rays, intervals and boxes."""
