from .sale import Sale, SalesChannel
from .sale_result import SaleResult, RejectionReason
from .sales_summary import SalesSummary

__all__ = ['Sale', 'SalesChannel', 'SaleResult', 'RejectionReason', 'SalesSummary']
