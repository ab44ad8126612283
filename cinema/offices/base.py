from abc import ABC, abstractmethod

from ..managers.ticket_registry import TicketRegistry, get_instance
from ..models import SalesChannel, SaleResult


class TicketOffice(ABC):
    """A place that sells tickets, be it a box office or the website"""
    channel: SalesChannel = None

    def __init__(self, registry: TicketRegistry = None):
        # non-owning reference, the registry outlives every office
        self.registry = registry if registry is not None else get_instance()

    @abstractmethod
    def sell_ticket(self, customer_name: str) -> SaleResult:
        """Sell one ticket to a customer
        Args:
            customer_name: str, name of the customer
        Returns:
            SaleResult: outcome of the sale
        """
        pass

    def __str__(self):
        return f"{self.__class__.__name__} ({self.channel.value})"
