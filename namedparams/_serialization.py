from typing import Any

import msgspec

__all__ = ("encode_json",)

_encoder = msgspec.json.Encoder()


def _default(value: Any) -> Any:
    return str(value)


def encode_json(data: Any) -> str:
    """Encode data to a JSON string, falling back to ``str()`` for unsupported values."""
    try:
        encoded = _encoder.encode(data)
    except TypeError:
        encoded = msgspec.json.encode(data, enc_hook=_default)
    return encoded.decode("utf-8")
