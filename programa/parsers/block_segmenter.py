"""Race block segmentation."""

import re


def split_blocks(text: str, anchor: re.Pattern) -> list[str]:
    """Split a document into per-race blocks.

    The text is split right before every occurrence of the anchor, so each
    block starts with its anchor. Fragments without an anchor (front matter
    before the first race) are discarded. Order is preserved.

    Args:
        text: The reassembled document text.
        anchor: The format's block anchor pattern.

    Returns:
        List of block texts, one per anchor occurrence at most.
    """
    starts = [match.start() for match in anchor.finditer(text)]
    if not starts:
        return []

    bounds = starts[1:] + [len(text)]
    blocks = [text[start:end] for start, end in zip(starts, bounds)]
    return [block for block in blocks if anchor.search(block)]
