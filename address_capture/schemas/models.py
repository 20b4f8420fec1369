# address_capture/schemas/models.py

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# =========================
# Address fragments
# =========================

AddressRole = Literal["street", "city", "state", "zip"]

ADDRESS_ROLES: tuple[AddressRole, ...] = ("street", "city", "state", "zip")


class AddressFragments(BaseModel):
    """
    Raw text found for each address role, before cleaning.
    A role that was not found on the page is an empty string.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    street: str = Field("", description="Street line text as found in the DOM (e.g., '5904 E 7 St').")
    city: str = Field("", description="City text as found in the DOM.")
    state: str = Field("", description="State/province text as found in the DOM.")
    zip: str = Field("", description="ZIP/postal code text as found in the DOM.")


class NormalizedAddress(BaseModel):
    """
    Cleaned address fragments. Absence is an empty string, never None.
    Values hold no whitespace/comma runs and no leading/trailing whitespace.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    street: str = Field("", description="Cleaned street line.")
    city: str = Field("", description="Cleaned city.")
    state: str = Field("", description="Cleaned state/province.")
    zip: str = Field("", description="Cleaned ZIP/postal code.")

    def is_empty(self) -> bool:
        return not (self.street or self.city or self.state or self.zip)


# =========================
# Extraction result
# =========================


class ExtractionSuccess(BaseModel):
    """Address captured from the page, plus the canonical single-line form."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    ok: Literal[True] = True
    url: str = Field("", description="Location of the document at extraction time.")
    street: str = Field("", description="Cleaned street line, empty if not captured.")
    city: str = Field("", description="Cleaned city, empty if not captured.")
    state: str = Field("", description="Cleaned state, empty if not captured.")
    zip: str = Field("", description="Cleaned ZIP, empty if not captured.")
    full_address: str = Field(
        ...,
        alias="fullAddress",
        description="Canonical address line, e.g. '5904 E 7 St, Tulsa, OK 74112'.",
    )

    @field_validator("full_address")
    @classmethod
    def _full_address_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("full_address must be non-empty")
        return v


class ExtractionFailure(BaseModel):
    """Extraction did not produce an address. Carries no partial data."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    ok: Literal[False] = False
    error: str = Field(..., description="Human-readable diagnostic.")


ExtractionResult = Annotated[ExtractionSuccess | ExtractionFailure, Field(discriminator="ok")]

ExtractionResultAdapter: TypeAdapter[ExtractionSuccess | ExtractionFailure] = TypeAdapter(ExtractionResult)


# =========================
# Locator configuration
# =========================


class LocatorConfig(BaseModel):
    """
    CSS selectors used to find address fragments.

    Defaults target listing markup of the form:
        <span id="propertyAddress">
          <span data-bind="text: PropertyDetails.Address">...</span>
          <span data-bind="text: PropertyDetails.City">...</span>, ...
        </span>
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    container_selector: str = Field(
        "#propertyAddress",
        description="Selector for the element wrapping the address parts. Lookups are scoped to it when present.",
    )
    street_selector: str = Field('span[data-bind*="PropertyDetails.Address"]', description="Selector for the street line.")
    city_selector: str = Field('span[data-bind*="PropertyDetails.City"]', description="Selector for the city.")
    state_selector: str = Field('span[data-bind*="PropertyDetails.State"]', description="Selector for the state.")
    zip_selector: str = Field('span[data-bind*="PropertyDetails.Zip"]', description="Selector for the ZIP code.")

    @field_validator("container_selector", "street_selector", "city_selector", "state_selector", "zip_selector")
    @classmethod
    def _selector_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("selector must be non-empty")
        return v

    def selector_for(self, role: AddressRole) -> str:
        return str(getattr(self, f"{role}_selector"))


# ============================================================
# Fetch/cache models
# ============================================================


class FetchPolicy(BaseModel):
    """
    Deterministic fetch policy for the document loader (offline-first).

    Networking is disabled by default; a cached snapshot is required unless
    `allow_network` is set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    allow_network: bool = Field(
        False,
        description="If False, enforce offline-only (cache must already exist).",
    )
    allow_non_200: bool = Field(
        False,
        description="If False, raise on any HTTP status >= 400.",
    )
    respect_robots: bool = Field(
        True,
        description="Whether to respect robots.txt before fetching online.",
    )
    timeout_s: float = Field(
        15.0,
        gt=0,
        description="HTTP timeout in seconds for online fetches.",
    )
    user_agent: str = Field(
        "address-capture/0.1 (+offline-first)",
        description="User-Agent string used in HTTP requests.",
    )
    cache_dir: Path = Field(
        default=Path("data/cache"),
        description="Directory where cached HTML and metadata files are stored.",
    )


# ============================================================
# Delivery
# ============================================================

WEBHOOK_URL_ENV = "ADDRESS_CAPTURE_WEBHOOK_URL"


def _webhook_url_from_env() -> str | None:
    return os.getenv(WEBHOOK_URL_ENV, "").strip() or None


class WebhookPolicy(BaseModel):
    """Where and how to POST captured addresses."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    webhook_url: str | None = Field(
        default_factory=_webhook_url_from_env,
        validate_default=True,
        description=f"Endpoint receiving the JSON payload. Defaults to ${WEBHOOK_URL_ENV}.",
    )
    timeout_s: float = Field(10.0, gt=0, description="HTTP timeout in seconds for the POST.")
    user_agent: str = Field("address-capture/0.1", description="User-Agent string used for delivery.")

    @field_validator("webhook_url")
    @classmethod
    def _http_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("webhook_url must be an http(s) URL")
        return v


class WebhookPayload(BaseModel):
    """
    JSON body delivered to the webhook.
    Fields not captured on the page are sent as null.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    address: str = Field(..., description="Canonical address line.")
    street: str | None = Field(None, description="Street line or null.")
    city: str | None = Field(None, description="City or null.")
    state: str | None = Field(None, description="State or null.")
    zip: str | None = Field(None, description="ZIP or null.")
    source_url: str = Field(..., alias="sourceUrl", description="Page URL, for traceability.")
    captured_at: datetime = Field(..., alias="capturedAt", description="UTC timestamp of the capture.")
