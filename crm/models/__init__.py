from .base import Document, generate_id
from .users import User
from .fields import Field
from .companies import Company
from .customers import Customer, EngageUpdate, MergeResult
from .products import Product, ProductCategory
from .deals import Deal, DealProduct
from .messenger_apps import MessengerApp
from .logs import AuditLog

__all__ = [
    "AuditLog",
    "Company",
    "Customer",
    "Deal",
    "DealProduct",
    "Document",
    "EngageUpdate",
    "Field",
    "MergeResult",
    "MessengerApp",
    "Product",
    "ProductCategory",
    "User",
    "generate_id",
]
