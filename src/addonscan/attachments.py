"""
Attachment grouping.

Large add-ons split optional parts into sibling directories named after the
primary add-on, e.g. Bagnon ships Bagnon_Bank, Bagnon_Config and
Bagnon_GuildBank. This module nests such records under their primary add-on.
"""

import logging
from typing import Dict, List, Optional, Sequence

from addonscan.models.addon import Addon

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "_"


def _parent_keys(addon: Addon) -> set[str]:
    """Names a child directory may be prefixed with to belong to this add-on."""
    return {key for key in (addon.directory_name, addon.title) if key}


def _find_parent(
    index: int, addons: Sequence[Addon], separator: str
) -> Optional[int]:
    """
    Pick the parent of addons[index], preferring the longest matching key.

    A match needs a non-empty suffix after the separator, so a record can
    never match itself through its own directory name.
    """
    child_name = addons[index].directory_name
    best: Optional[int] = None
    best_length = -1

    for candidate_index, candidate in enumerate(addons):
        if candidate_index == index:
            continue
        for key in _parent_keys(candidate):
            prefix = key + separator
            if len(child_name) > len(prefix) and child_name.startswith(prefix):
                if len(key) > best_length:
                    best = candidate_index
                    best_length = len(key)

    return best


def _creates_cycle(child: int, parent: int, parents: Dict[int, int]) -> bool:
    current: Optional[int] = parent
    while current is not None:
        if current == child:
            return True
        current = parents.get(current)
    return False


def group_attachments(
    addons: Sequence[Addon], separator: str = DEFAULT_SEPARATOR
) -> List[Addon]:
    """
    Nest attachment records under their primary add-ons.

    A record is an attachment of another when its directory name is
    `<key><separator><suffix>`, where key is the other record's directory name
    or title. Attachments are removed from the top level. Nested attachments
    (A_B_C under A_B under A) are supported.

    Args:
        addons: Top-level records as produced by extraction
        separator: Character joining parent name and suffix

    Returns:
        New list of top-level records ordered by directory name. Input
        records are not modified.
    """
    if not separator:
        raise ValueError("Attachment separator cannot be empty")

    ordered = sorted(addons, key=lambda addon: addon.directory_name)

    parents: Dict[int, int] = {}
    for index in range(len(ordered)):
        parent = _find_parent(index, ordered, separator)
        if parent is None:
            continue
        if _creates_cycle(index, parent, parents):
            logger.debug(
                "Not grouping %s under %s: would form a cycle",
                ordered[index].directory_name,
                ordered[parent].directory_name,
            )
            continue
        parents[index] = parent

    children: Dict[int, List[int]] = {}
    for child, parent in parents.items():
        children.setdefault(parent, []).append(child)

    def build(index: int) -> Addon:
        child_indexes = children.get(index)
        if not child_indexes:
            return ordered[index]
        return ordered[index].with_attachments(
            build(child) for child in sorted(child_indexes)
        )

    grouped = [build(index) for index in range(len(ordered)) if index not in parents]

    if parents:
        logger.info(
            f"Grouped {len(parents)} attachment(s) under {len(children)} add-on(s)"
        )
    return grouped
