"""
MMS product booking SDK functions.
"""

import threading
from typing import List, Optional

from mms_api.sdk.models import Product, UserProduct
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import path_segment
from mms_api.sdk.types import ACCOUNT_API_ROOT, PRODUCT_API_ROOT


def _user_products_path(account_id: str) -> str:
    return f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/products"


def retrieve_user_activated_products(
    client: Dispatcher, account_id: str, cancel: Optional[threading.Event] = None
) -> List[UserProduct]:
    """GET accounts/{accountId}/products"""
    return client.fetch(_user_products_path(account_id), List[UserProduct], cancel)


def activate_or_update_product(
    client: Dispatcher,
    account_id: str,
    product: UserProduct,
    cancel: Optional[threading.Event] = None,
) -> UserProduct:
    """
    Activate a product for a member, or update its dates.

    PUT accounts/{accountId}/products
    """
    return client.put(_user_products_path(account_id), UserProduct, product, cancel)


def retrieve_gym_products(
    client: Dispatcher, cancel: Optional[threading.Event] = None
) -> List[Product]:
    """GET products"""
    return client.fetch(PRODUCT_API_ROOT, List[Product], cancel)


def product_details(
    client: Dispatcher, product_id: str, cancel: Optional[threading.Event] = None
) -> Product:
    """GET products/{productId}"""
    return client.fetch(f"{PRODUCT_API_ROOT}/{path_segment(product_id)}", Product, cancel)


def deactivate_product(
    client: Dispatcher,
    account_id: str,
    product_id: str,
    cancel: Optional[threading.Event] = None,
) -> None:
    """DELETE accounts/{accountId}/products/{productId}"""
    client.remove(f"{_user_products_path(account_id)}/{path_segment(product_id)}", cancel)
