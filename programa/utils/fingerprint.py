"""Content fingerprint for deduplication by the merge layer."""

import hashlib


def content_fingerprint(raw_text: str) -> str:
    """Return a deterministic, order-sensitive hash of the raw input text.

    The fingerprint is a change-detection key, not a security primitive.
    Lone surrogates (from lenient decoding upstream) are hashed as-is.

    Args:
        raw_text: The full raw document text.

    Returns:
        Hex digest of the text.
    """
    return hashlib.sha256(raw_text.encode("utf-8", "surrogatepass")).hexdigest()
