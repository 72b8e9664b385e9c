"""Scattering models and the textures that parameterize them."""
