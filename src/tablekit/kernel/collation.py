"""Kernel – collation key for user-facing labels and values."""
from __future__ import annotations

import locale
import unicodedata

__all__ = ["collation_key"]


def collation_key(text: str) -> tuple[str, str]:
    """Sort key placing accented letters beside their base letter.

    The primary key is the casefolded text with combining marks stripped
    after NFKD, so ``"Éclair"`` sorts among the ``e`` words and ``"ﬁle"``
    as ``"file"``. Ties fall back to the process locale's ``strxfrm`` of
    the casefolded text, which keeps ``"e"`` and ``"é"`` in a fixed order.
    """
    folded = text.casefold()
    base = "".join(
        ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch)
    )
    return base, locale.strxfrm(folded)
