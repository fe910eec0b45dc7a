"""
Ordering — subproject evaluation order.

Every subproject's evaluation depends on a single anchor project
(``:app``), so the anchor is evaluated first.  Registering the same
dependency more than once has no further effect.
"""
from __future__ import annotations

from typing import Iterable, List, Optional


def evaluation_order(names: Iterable[str], anchor: Optional[str] = "app") -> List[str]:
    """
    Return *names* de-duplicated, anchor first, the rest in input order.

    Raises ValueError if *anchor* is set and *names* is non-empty but
    does not contain it.  No subprojects means no dependency to register.
    """
    ordered = list(dict.fromkeys(names))
    if anchor is None or not ordered:
        return ordered

    if anchor not in ordered:
        raise ValueError(f"Evaluation anchor ':{anchor}' is not a subproject")

    ordered.remove(anchor)
    return [anchor] + ordered
