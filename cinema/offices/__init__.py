from .base import TicketOffice
from .box_office import BoxOffice
from .online_shop import OnlineShop

__all__ = ['TicketOffice', 'BoxOffice', 'OnlineShop']
