"""Post-processing that merges runs of unknown tokens."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence


def fuse_unk(tokens: Sequence[str], lookup: Callable[[str], int], unk_id: int) -> List[str]:
    """Collapse each run of consecutive unknown tokens into one token.

    ``lookup`` resolves a token to its id, returning ``unk_id`` for tokens that
    are not in the vocabulary. A run is fused by concatenating its raw token
    strings, so ``["z", "z"]`` becomes ``["zz"]``. Applying this twice is the
    same as applying it once.
    """
    fused: List[str] = []
    run: Optional[str] = None
    for token in tokens:
        if lookup(token) == unk_id:
            run = token if run is None else run + token
            continue
        if run is not None:
            fused.append(run)
            run = None
        fused.append(token)
    if run is not None:
        fused.append(run)
    return fused
