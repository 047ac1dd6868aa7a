"""
Port interfaces for the propcraft engine.

This module contains the interface definitions using Python Protocols
to define contracts between the engine and its external driver or resolver.
"""

from .bit_source_port import BitSourcePort
from .generator_port import ComponentizedGeneratorPort, GeneratorPort

__all__ = [
    "BitSourcePort",
    "GeneratorPort",
    "ComponentizedGeneratorPort",
]
