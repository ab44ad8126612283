import logging
import threading
from typing import List, Tuple, Union

from ..core.config_loader import ConfigLoader
from ..core.singleton import Singleton
from ..models import Sale, SalesChannel, SaleResult, SalesSummary


class TicketRegistry:
    """
    Ticket registry for a single screen
    Serializes sell attempts from every sales channel against a fixed capacity
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")

        self._capacity = capacity
        self._sales: List[Sale] = []
        self._lock = threading.Lock()
        self.logger = logging.getLogger('ticket_registry')

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def sold(self) -> int:
        with self._lock:
            return len(self._sales)

    @property
    def remaining(self) -> int:
        with self._lock:
            return self._capacity - len(self._sales)

    @property
    def is_sold_out(self) -> bool:
        return self.remaining == 0

    @property
    def sales(self) -> Tuple[Sale, ...]:
        """Accepted sales in acceptance order (copy)"""
        with self._lock:
            return tuple(self._sales)

    def sell(self, customer_name: str, channel: Union[SalesChannel, str]) -> SaleResult:
        """Sell one ticket
        Args:
            customer_name: str, taken as given
            channel: SalesChannel or its string value
        Returns:
            SaleResult: accepted with remaining seats, or rejected as sold out
        """
        channel = SalesChannel(channel)

        with self._lock:
            if len(self._sales) >= self._capacity:
                result = SaleResult.reject(customer_name, channel, self._capacity - len(self._sales))
            else:
                self._sales.append(Sale(customer_name, channel))
                result = SaleResult.accept(customer_name, channel, self._capacity - len(self._sales))

        if result.accepted:
            self.logger.info(f"Ticket sold to {customer_name} via {channel.value}, {result.remaining} seats left")
        else:
            self.logger.warning(f"Sold out, rejected {customer_name} via {channel.value}")
        return result

    def summary(self) -> SalesSummary:
        """Snapshot of capacity, sold seats, per-channel counts and customers"""
        with self._lock:
            sales = list(self._sales)

        per_channel_counts = {channel: 0 for channel in SalesChannel}
        customer_channels = {}
        for sale in sales:
            per_channel_counts[sale.channel] += 1
            customer_channels[sale.customer_name] = sale.channel

        return SalesSummary(
            total_capacity=self._capacity,
            sold=len(sales),
            remaining=self._capacity - len(sales),
            per_channel_counts=per_channel_counts,
            customer_names=tuple(sale.customer_name for sale in sales),
            customer_channels=customer_channels,
        )

    def __repr__(self):
        return f"{self.__class__.__name__}(capacity={self._capacity}, sold={self.sold}, id={id(self):#x})"


class SharedTicketRegistry(TicketRegistry, Singleton):
    """
    Process-wide ticket registry
    Every sales channel obtains this same instance through get_instance()
    """

    def __init__(self, capacity: int = None):
        if capacity is None:
            capacity = ConfigLoader.get_capacity()
        super().__init__(capacity)
        self.logger.info(f"Shared ticket registry created with {capacity} seats")


def get_instance(capacity: int = None) -> SharedTicketRegistry:
    """Get the shared registry, building it with the configured capacity on first call"""
    if capacity is None:
        return SharedTicketRegistry.instance()
    return SharedTicketRegistry.instance(capacity)
