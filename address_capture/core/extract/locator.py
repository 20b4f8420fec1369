# address_capture/core/extract/locator.py
"""
Tiered lookup of address fragments under uncertain markup.

For every role the lookup plan is an ordered list of attempts:
  1) role selector scoped to the address container (or the whole document
     when no container exists)
  2) role selector against the whole document, planned ONLY when a
     container was found (otherwise it would repeat attempt 1)

Attempts run lazily; the first non-empty text wins, so a scoped hit is
never overridden by the unscoped one. Query faults are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Literal

from address_capture.schemas.models import ADDRESS_ROLES, AddressFragments, AddressRole, LocatorConfig

from .document import QueryableDocument

logger = logging.getLogger(__name__)

ScopeLabel = Literal["container", "document"]


@dataclass(frozen=True)
class LookupAttempt:
    role: AddressRole
    scope_label: ScopeLabel
    scope: Any | None  # None = whole document
    selector: str


def find_container(document: QueryableDocument, config: LocatorConfig) -> Any | None:
    return document.select_first(config.container_selector)


def plan_lookups(document: QueryableDocument, config: LocatorConfig | None = None) -> dict[AddressRole, list[LookupAttempt]]:
    cfg = config or LocatorConfig()
    container = find_container(document, cfg)

    plan: dict[AddressRole, list[LookupAttempt]] = {}
    for role in ADDRESS_ROLES:
        selector = cfg.selector_for(role)
        if container is None:
            attempts = [LookupAttempt(role, "document", None, selector)]
        else:
            attempts = [
                LookupAttempt(role, "container", container, selector),
                LookupAttempt(role, "document", None, selector),
            ]
        plan[role] = attempts
    return plan


def _run_attempts(document: QueryableDocument, attempts: list[LookupAttempt]) -> Iterator[tuple[LookupAttempt, str]]:
    for attempt in attempts:
        yield attempt, document.text_of(document.select_first(attempt.selector, attempt.scope))


def resolve_role(document: QueryableDocument, attempts: list[LookupAttempt]) -> str:
    for attempt, text in _run_attempts(document, attempts):
        if text:
            logger.debug("address %s resolved via %s scope (%s)", attempt.role, attempt.scope_label, attempt.selector)
            return text
    return ""


def locate_fragments(document: QueryableDocument, config: LocatorConfig | None = None) -> AddressFragments:
    """Resolve the raw street/city/state/zip text from `document`."""
    plan = plan_lookups(document, config)
    return AddressFragments(**{role: resolve_role(document, attempts) for role, attempts in plan.items()})


__all__ = ["LookupAttempt", "find_container", "plan_lookups", "resolve_role", "locate_fragments"]
