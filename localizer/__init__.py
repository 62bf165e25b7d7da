from .lookup import (
    localize_string,
    localize_string_with_default,
    localize_text,
    localize_text_with_default,
    resolve,
)
from .normalize import (
    EMPTY,
    DecodeError,
    DecodedDocument,
    Entry,
    Localization,
    decode,
    decode_bytes,
    decode_entries,
    from_entries,
    from_mapping,
)

__all__ = [
    "EMPTY",
    "DecodeError",
    "DecodedDocument",
    "Entry",
    "Localization",
    "decode",
    "decode_bytes",
    "decode_entries",
    "from_entries",
    "from_mapping",
    "localize_string",
    "localize_string_with_default",
    "localize_text",
    "localize_text_with_default",
    "resolve",
]
