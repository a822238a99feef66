from typing import List, Optional, Sequence

import torch

from based.alphabet import Alphabet
from based.codec import decode, encode
from based.config import CodecConfig
from based.widths import from_dtype


def encode_tensor(
    alphabet: Alphabet, ids: torch.Tensor, config: Optional[CodecConfig] = None
) -> List[str]:
    # ids -> N length 1-d integer tensor, width taken from its dtype
    if ids.dim() != 1:
        raise ValueError(f"expected a 1-d tensor of ids, got shape {tuple(ids.shape)}")
    int_type = from_dtype(ids.dtype)
    return [encode(alphabet, v, int_type, config) for v in ids.tolist()]


def decode_to_tensor(
    alphabet: Alphabet,
    reps: Sequence[str],
    dtype: torch.dtype = torch.int64,
    config: Optional[CodecConfig] = None,
) -> torch.Tensor:
    int_type = from_dtype(dtype)
    return torch.tensor([decode(alphabet, r, int_type, config) for r in reps], dtype=dtype)
