from .dimensions import Concept, Branch, Category, Product
from .sales import Hourly, Header, ItemSales, PaymentDetail, Cashier
from .compliance import BirDetailed, BirSummary, GovernmentDiscount, VoidTx

__all__ = [
    'Concept', 'Branch', 'Category', 'Product',
    'Hourly', 'Header', 'ItemSales', 'PaymentDetail', 'Cashier',
    'BirDetailed', 'BirSummary', 'GovernmentDiscount', 'VoidTx',
]
