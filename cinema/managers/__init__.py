from .ticket_registry import TicketRegistry, SharedTicketRegistry, get_instance

__all__ = ['TicketRegistry', 'SharedTicketRegistry', 'get_instance']
