from ..models import SaleResult, SalesSummary


class SalesFormatter:
    def __init__(self, title='Cinema Summary'):
        self.title = title

    def format_result(self, result: SaleResult) -> str:
        """Confirmation or sold-out message for one sell attempt"""
        if result.accepted:
            return f"One ticket sold to {result.customer_name}. Available seats: {result.remaining}"
        return f"Sorry {result.customer_name}, the cinema is fully booked."

    def format_summary(self, summary: SalesSummary) -> str:
        """Multi-line summary block"""
        lines = [
            f"{self.title}:",
            f"Total Seats: {summary.total_capacity}",
            f"Sold Seats: {summary.sold}",
            f"Available Seats: {summary.remaining}",
        ]
        for channel, count in summary.per_channel_counts.items():
            lines.append(f"  {self._channel_label(channel)}: {count}")
        lines.append(f"Customers: {', '.join(summary.customer_names)}")
        return "\n".join(lines)

    @staticmethod
    def _channel_label(channel):
        # box_office -> Box Office
        return channel.value.replace('_', ' ').title()
