import threading

from cinema.core.config_loader import ConfigLoader
from cinema.core.log_formatter import setup_logger
from cinema.managers.ticket_registry import TicketRegistry, get_instance
from cinema.models import SalesChannel
from cinema.offices import BoxOffice, OnlineShop
from cinema.utils.sales_formatter import SalesFormatter


def run_sales_day(formatter):
    """Two box offices and the website sell through the shared registry"""
    box_office1 = BoxOffice(get_instance(), 'Box Office 1')
    print(formatter.format_result(box_office1.sell_ticket("Alice")))

    box_office2 = BoxOffice(get_instance(), 'Box Office 2')
    for name in ("Marie", "Rosalind", "Margaret"):
        print(formatter.format_result(box_office2.sell_ticket(name)))

    online_sales = OnlineShop(get_instance())
    for name in ("Tinky Winky", "Homer", "Marge", "Bart", "Lisa", "Maggie"):
        print(formatter.format_result(online_sales.sell_ticket(name)))

    print()
    # a late customer at the box office, the screen is already full
    print(formatter.format_result(box_office2.sell_ticket("Cemre")))

    print("\nFinal Cinema Ticket Sales Summary:")
    print(formatter.format_summary(online_sales.registry.summary()))

    print("\nVerifying Singleton Instance:")
    print(f"box office 1 and box office 2 share the registry: {box_office1.registry is box_office2.registry}")
    print(f"box office 1 and online sales share the registry: {box_office1.registry is online_sales.registry}")
    for office in (box_office1, box_office2, online_sales):
        print(f"{office}: {office.registry!r}")


def run_rush(formatter, capacity, buyers=50):
    """Many buyers hit a fresh registry at once, nobody gets a seat that does not exist"""
    registry = TicketRegistry(capacity)
    channels = list(SalesChannel)
    barrier = threading.Barrier(buyers)

    def buy(i):
        barrier.wait()
        registry.sell(f"buyer-{i}", channels[i % len(channels)])

    threads = [threading.Thread(target=buy, args=(i,)) for i in range(buyers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print(f"\nRush with {buyers} buyers for {capacity} seats:")
    print(formatter.format_summary(registry.summary()))


def main():
    config = ConfigLoader.load_config()
    setup_logger('ticket_registry', config)

    formatter = SalesFormatter()
    run_sales_day(formatter)
    run_rush(formatter, ConfigLoader.get_capacity(config))


if __name__ == "__main__":
    main()
