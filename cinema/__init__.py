"""Cinema ticket sales shared by several sales channels through one registry"""
from .managers import TicketRegistry, SharedTicketRegistry, get_instance
from .models import Sale, SalesChannel, SaleResult, RejectionReason, SalesSummary

__all__ = [
    'TicketRegistry', 'SharedTicketRegistry', 'get_instance',
    'Sale', 'SalesChannel', 'SaleResult', 'RejectionReason', 'SalesSummary',
]
