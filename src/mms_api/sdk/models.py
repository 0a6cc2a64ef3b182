"""
MMS API data-transfer objects.

Plain records, no behavior. Attribute names are snake_case; on the wire they
are lower-camel-case (see CamelCaseModel).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from mms_api.sdk.base import CamelCaseModel


# ── Member accounts ─────────────────────────────────────────────────────

class Contact(CamelCaseModel):
    phone: Optional[str] = None
    street: Optional[str] = None
    street_number: Optional[str] = None
    zip_code: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class CorporateFitness(CamelCaseModel):
    start_timestamp: Optional[datetime] = None
    end_timestamp: Optional[datetime] = None


class Membership(CamelCaseModel):
    """Membership contract attached to a member account.

    `membership_type` takes one of the MembershipType codes.
    """
    membership_id: Optional[str] = None
    agreement_number: Optional[str] = None
    membership_type: Optional[str] = None
    membership_sub_type: Optional[str] = None
    end_of_contract: Optional[str] = None
    start_of_contract: Optional[str] = None
    referring_member_id: Optional[str] = None
    barcode: Optional[str] = None
    verification_tan: Optional[str] = Field(default=None, alias="verificationTAN")
    corporate_fitness: Optional[CorporateFitness] = None


class MemberAccount(CamelCaseModel):
    account_id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    contact: Optional[Contact] = None
    membership: Optional[Membership] = None


class MemberAccountPage(CamelCaseModel):
    """One page of GET accounts."""
    offset: int = 0
    limit: int = 0
    items: List[MemberAccount] = Field(default_factory=list)
    total: int = 0
    has_next: bool = False


class RoleAssignment(CamelCaseModel):
    trainer: bool = False


# ── RFIDs ───────────────────────────────────────────────────────────────

class Rfid(CamelCaseModel):
    rfid: Optional[str] = None
    tag_format: Optional[str] = None


class RfidList(CamelCaseModel):
    rfids: List[Rfid] = Field(default_factory=list)


# ── Gym visits ──────────────────────────────────────────────────────────

class UserPresence(CamelCaseModel):
    # Epoch milliseconds; None lets the server use the time of the call.
    timestamp: Optional[int] = None


class Admission(CamelCaseModel):
    first_admission: bool = False


# ── Products ────────────────────────────────────────────────────────────

class Product(CamelCaseModel):
    product_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[str] = None


class UserProduct(CamelCaseModel):
    product_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


# ── Trainer tasks ───────────────────────────────────────────────────────

class Task(CamelCaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    due_date: Optional[str] = None
    author_id: Optional[str] = None
    target_id: Optional[str] = None
    completer_id: Optional[str] = None
    completed: bool = False


# ── Webhooks ────────────────────────────────────────────────────────────

class WebhookRequest(CamelCaseModel):
    url: Optional[str] = None
    secret: Optional[str] = None


class WebhookResponse(WebhookRequest):
    id: int = 0


# ── Push notifications ──────────────────────────────────────────────────

class PartnerPushNotification(CamelCaseModel):
    text: Optional[str] = None
    deeplink: Optional[str] = None
