"""
Codec configuration for ATGCCoder.
"""

from dataclasses import dataclass

import yaml

from ATGCCoder.encoding.constants import MAX_INPUT_BYTES


@dataclass
class CodecConfig:
    """
    Configuration shared by the Encoder, Decoder and command line.
    """

    text_encoding: str = "utf-8"
    max_input_bytes: int = MAX_INPUT_BYTES

    # Symbols per output line when writing files; 0 disables wrapping.
    line_width: int = 0

    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_input_bytes < 0:
            raise ValueError(f"max_input_bytes must be non-negative, got {self.max_input_bytes}")
        if self.line_width < 0:
            raise ValueError(f"line_width must be non-negative, got {self.line_width}")

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_yaml(cls, filepath: str) -> "CodecConfig":
        """Creates a CodecConfig from a YAML file, optionally nested under a 'codec' key."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {filepath}")
        return cls.from_dict(data.get("codec", data))
