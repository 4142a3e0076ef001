"""API modules for didox-sdk."""

from .account import AccountApi
from .auth import AuthApi
from .documents import DocumentsApi
from .product_classes import ProductClassesApi
from .profile import ProfileApi, UsersApi, VatApi, WarehousesApi
from .utilities import UtilitiesApi

__all__ = [
    "AccountApi",
    "AuthApi",
    "DocumentsApi",
    "ProductClassesApi",
    "ProfileApi",
    "UsersApi",
    "UtilitiesApi",
    "VatApi",
    "WarehousesApi",
]
