from dataclasses import dataclass, fields, replace

import yaml

from based.widths import POINTER_BITS, IntType

SIGNED_MODES = ("checked", "bits")


@dataclass
class CodecConfig:
    @classmethod
    def from_yaml(cls, path: str):
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def override(self, **kwargs):
        # validate on a copy so a rejected override leaves this config untouched
        candidate = replace(self, **{k: v for k, v in kwargs.items() if v is not None})
        for f in fields(self):
            setattr(self, f.name, getattr(candidate, f.name))

    working_bits: int = POINTER_BITS  # width used to index the digit table
    allow_empty: bool = True  # "" decodes to 0
    signed_mode: str = "checked"  # or "bits" for two's complement decoding

    @property
    def working_type(self) -> IntType:
        return IntType(f"u{self.working_bits}", self.working_bits, False)

    def __post_init__(self):
        if self.working_bits < 8:
            raise ValueError(f"working_bits must be at least 8, got {self.working_bits}")
        if self.signed_mode not in SIGNED_MODES:
            raise ValueError(
                f"signed_mode must be one of {SIGNED_MODES}, got {self.signed_mode!r}"
            )
