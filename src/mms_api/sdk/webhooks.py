"""
MMS webhook SDK functions.
"""

import threading
from typing import List, Optional

from mms_api.sdk.models import WebhookRequest, WebhookResponse
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.types import WEBHOOK_API_ROOT


def retrieve_webhook(
    client: Dispatcher, webhook_id: int, cancel: Optional[threading.Event] = None
) -> WebhookResponse:
    """GET webhooks/{id}"""
    return client.fetch(f"{WEBHOOK_API_ROOT}/{webhook_id}", WebhookResponse, cancel)


def update_webhook(
    client: Dispatcher,
    webhook_id: int,
    webhook: WebhookRequest,
    cancel: Optional[threading.Event] = None,
) -> WebhookResponse:
    """PUT webhooks/{id}"""
    return client.put(f"{WEBHOOK_API_ROOT}/{webhook_id}", WebhookResponse, webhook, cancel)


def delete_webhook(
    client: Dispatcher, webhook_id: int, cancel: Optional[threading.Event] = None
) -> None:
    """DELETE webhooks/{id}"""
    client.remove(f"{WEBHOOK_API_ROOT}/{webhook_id}", cancel)


def list_webhooks(
    client: Dispatcher, cancel: Optional[threading.Event] = None
) -> List[WebhookResponse]:
    """GET webhooks"""
    return client.fetch(WEBHOOK_API_ROOT, List[WebhookResponse], cancel)


def create_webhook(
    client: Dispatcher, webhook: WebhookRequest, cancel: Optional[threading.Event] = None
) -> WebhookResponse:
    """
    Register a webhook URL.

    POST webhooks

    Returns:
        WebhookResponse {id, url, secret}
    """
    return client.send(WEBHOOK_API_ROOT, WebhookResponse, webhook, cancel)


def trigger_webhook(
    client: Dispatcher, webhook_id: int, cancel: Optional[threading.Event] = None
) -> None:
    """
    Ask the server to fire a test event at the webhook.

    POST webhooks/{id}/trigger (no body)
    """
    client.send_void(f"{WEBHOOK_API_ROOT}/{webhook_id}/trigger", None, cancel)
