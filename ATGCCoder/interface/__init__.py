"""
ATGCCoder interface module.
"""

from ATGCCoder.interface.encoder import Encoder
from ATGCCoder.interface.decoder import Decoder

__all__ = [
    "Encoder",
    "Decoder",
]
