# mdcompile/group.py
from typing import Dict, Iterable, Optional

from .models import CodeBlock, Group
from .utils.ids import IdFactory, random_id


def group_blocks(blocks: Iterable[CodeBlock], id_factory: Optional[IdFactory] = None) -> Dict[str, Group]:
    """
    Partition blocks into compilation groups.

    Blocks sharing a non-empty `assembly=` id form one group no matter how far
    apart they are. Every other block gets a group of its own under a
    generated key. The result preserves first-seen group order and document
    order inside each group.
    """
    make_id = id_factory or random_id
    blocks = list(blocks)
    explicit = {b.metadata.group_id for b in blocks if b.metadata.group_id}

    groups: Dict[str, Group] = {}
    for block in blocks:
        key = block.metadata.group_id
        if not key:
            key = make_id()
            # Generated keys must never land on an explicit id or a previous key.
            while key in explicit or key in groups:
                key = make_id()
            groups[key] = Group(key=key, blocks=[block])
            continue

        group = groups.get(key)
        if group is None:
            groups[key] = Group(key=key, blocks=[block])
        else:
            group.blocks.append(block)
    return groups
