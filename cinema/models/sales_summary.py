from dataclasses import dataclass, field
from typing import Dict, Tuple

from .sale import SalesChannel


@dataclass(frozen=True)
class SalesSummary:
    """Point-in-time snapshot of the registry, detached from later sales"""
    total_capacity: int
    sold: int
    remaining: int
    per_channel_counts: Dict[SalesChannel, int] = field(default_factory=dict)
    customer_names: Tuple[str, ...] = ()
    # each distinct name mapped to the channel of its latest sale
    customer_channels: Dict[str, SalesChannel] = field(default_factory=dict)
