"""
Generation configuration.

Provides validated, file-backed options for village generation.
"""

from .config import VillageGeneratorOptions, load_generator_options

__all__ = ["VillageGeneratorOptions", "load_generator_options"]
