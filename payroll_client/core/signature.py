import base64
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class SignatureSurface(Protocol):
    """Anything a signature was drawn on that can export itself as a data URL."""

    def to_data_url(self) -> str: ...


def encode_data_url(image: bytes, mime_type: str = "image/png") -> str:
    encoded = base64.b64encode(image).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


@dataclass(frozen=True)
class PNGSignature:
    """Signature captured as raw image bytes (PNG unless told otherwise)."""

    image: bytes
    mime_type: str = "image/png"

    def to_data_url(self) -> str:
        return encode_data_url(self.image, self.mime_type)
