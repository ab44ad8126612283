from dataclasses import dataclass
from enum import Enum


class SalesChannel(Enum):
    """Where a sale request came from, recorded for reporting only"""
    BOX_OFFICE = 'box_office'
    ONLINE = 'online'


@dataclass(frozen=True)
class Sale:
    """One accepted ticket purchase"""
    customer_name: str
    channel: SalesChannel
