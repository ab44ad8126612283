from .base import TicketOffice
from ..models import SalesChannel, SaleResult


class OnlineShop(TicketOffice):
    """Website sales"""
    channel = SalesChannel.ONLINE

    def sell_ticket(self, customer_name: str) -> SaleResult:
        return self.registry.sell(customer_name, self.channel)
