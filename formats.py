from dataclasses import dataclass

import numpy as np

DEFAULT_FORMAT = "int64"

@dataclass(frozen=True)
class IntegerFormat:
    name: str
    bits: int           # width including the sign bit
    min_value: int      # -2^(bits-1)
    max_value: int      # 2^(bits-1) - 1
    dtype: np.dtype

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce an exact integer modulo 2^bits into the signed range,
        the way two's complement hardware does."""
        modulus = 1 << self.bits
        return (value - self.min_value) % modulus + self.min_value

def _derive(name: str, dtype) -> IntegerFormat:
    info = np.iinfo(dtype)
    return IntegerFormat(
        name=name, bits=info.bits,
        min_value=int(info.min), max_value=int(info.max),
        dtype=np.dtype(dtype)
    )

# Signed two's complement formats, keyed by canonical name and common aliases.
_REGISTRY = {
    "int64":  np.int64,
    "i64":    np.int64,
    "long":   np.int64,

    "int32":  np.int32,
    "i32":    np.int32,
    "int":    np.int32,

    "int16":  np.int16,
    "i16":    np.int16,
    "short":  np.int16,

    "int8":   np.int8,
    "i8":     np.int8,
    "byte":   np.int8,
}

def get_integer_format(name: str) -> IntegerFormat:
    key = (name or DEFAULT_FORMAT).lower()
    try:
        dtype = _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {sorted(_REGISTRY.keys())}")
    return _derive(np.dtype(dtype).name, dtype)

INT64 = get_integer_format("int64")
