from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .sale import SalesChannel


class RejectionReason(Enum):
    SOLD_OUT = 'sold_out'


@dataclass(frozen=True)
class SaleResult:
    """Outcome of a single sell attempt"""
    customer_name: str
    channel: SalesChannel
    remaining: int  # seats left after this attempt
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def sold_out(self) -> bool:
        return self.reason is RejectionReason.SOLD_OUT

    @classmethod
    def accept(cls, customer_name: str, channel: SalesChannel, remaining: int) -> 'SaleResult':
        return cls(customer_name, channel, remaining)

    @classmethod
    def reject(cls, customer_name: str, channel: SalesChannel, remaining: int,
               reason: RejectionReason = RejectionReason.SOLD_OUT) -> 'SaleResult':
        return cls(customer_name, channel, remaining, reason)

    def to_dict(self) -> dict:
        """Result dict in the {'success': ...} / {'error': ...} form"""
        if self.accepted:
            return {
                'success': True,
                'customer': self.customer_name,
                'channel': self.channel.value,
                'remaining': self.remaining,
            }
        return {
            'error': self.reason.value,
            'customer': self.customer_name,
            'channel': self.channel.value,
            'remaining': self.remaining,
        }
