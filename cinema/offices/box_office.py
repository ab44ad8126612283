from .base import TicketOffice
from ..models import SalesChannel, SaleResult


class BoxOffice(TicketOffice):
    """Counter sales at the cinema"""
    channel = SalesChannel.BOX_OFFICE

    def __init__(self, registry=None, name: str = 'Box Office'):
        super().__init__(registry)
        self.name = name

    def sell_ticket(self, customer_name: str) -> SaleResult:
        return self.registry.sell(customer_name, self.channel)

    def __str__(self):
        return f"{self.name} ({self.channel.value})"
