# checkout/services/stripe.py
from __future__ import annotations

import json
import logging
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from django.conf import settings

from checkout.services.exceptions import (
    PaymentNotConfiguredError,
    PaymentProviderError,
)

logger = logging.getLogger(__name__)

STRIPE_BASE = "https://api.stripe.com/v1"


def _stripe_cfg() -> dict:
    payments = getattr(settings, "PAYMENTS", {}) or {}
    cfg = (payments.get("STRIPE") or {}) if isinstance(payments, dict) else {}
    return cfg if isinstance(cfg, dict) else {}


def _get_secret_key() -> str:
    sk = (_stripe_cfg().get("SECRET_KEY") or "").strip()
    if not sk:
        raise PaymentNotConfiguredError(
            "Stripe not configured. Set STRIPE_SECRET_KEY in .env to enable test payments."
        )
    return sk


def _safe_preview(text: str, limit: int = 800) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + " ...(truncated)"


def _parse_json_or_text(raw: str) -> dict[str, Any]:
    raw = raw or ""
    try:
        parsed = json.loads(raw)
    except ValueError:
        return {"kind": "text", "raw": raw}
    if isinstance(parsed, dict):
        return {"kind": "json", "json": parsed, "raw": raw}
    return {"kind": "json_non_object", "json": parsed, "raw": raw}


def _request_form(
    method: str, url: str, *, fields: list[tuple[str, str]], timeout: int = 25
) -> dict[str, Any]:
    sk = _get_secret_key()
    data = urlencode(fields).encode("utf-8")

    req = Request(
        url,
        data=data,
        headers={
            "Authorization": f"Bearer {sk}",
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        },
        method=method,
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
            parsed_any = _parse_json_or_text(raw)
    except HTTPError as e:
        raw = e.read().decode("utf-8", errors="replace") if e.fp else ""
        parsed_any = _parse_json_or_text(raw)

        if parsed_any.get("kind") == "json":
            err = (parsed_any.get("json") or {}).get("error") or {}
            msg = err.get("message") if isinstance(err, dict) else str(err)
            raise PaymentProviderError(
                f"Stripe HTTPError: {e.code} {msg or 'Stripe rejected request'}"
            ) from e

        preview = _safe_preview(parsed_any.get("raw") or str(e))
        raise PaymentProviderError(f"Stripe HTTPError: {e.code} {preview}") from e
    except URLError as e:
        raise PaymentProviderError(f"Stripe URLError: {e.reason}") from e
    except OSError as e:
        raise PaymentProviderError(f"Stripe request failed: {e}") from e

    if parsed_any.get("kind") != "json":
        raise PaymentProviderError(
            f"Stripe returned non-JSON: {_safe_preview(parsed_any.get('raw') or '')}"
        )

    return parsed_any.get("json") or {}


def create_payment_intent(
    *,
    amount_minor: int,
    currency: str,
    metadata: dict | None = None,
) -> dict:
    """
    Request a card payment authorization for amount_minor (e.g. kuruş).

    Returns the PaymentIntent object; the caller hands client_secret to the
    storefront to confirm the card payment.
    """
    fields: list[tuple[str, str]] = [
        ("amount", str(int(amount_minor))),
        ("currency", str(currency).strip().lower()),
        ("payment_method_types[]", "card"),
    ]
    for key, value in (metadata or {}).items():
        fields.append((f"metadata[{key}]", str(value)))

    intent = _request_form("POST", f"{STRIPE_BASE}/payment_intents", fields=fields)

    if not intent.get("client_secret"):
        raise PaymentProviderError("Stripe response is missing client_secret")

    logger.info(
        "Payment intent created",
        extra={"intent_id": intent.get("id"), "amount_minor": int(amount_minor)},
    )
    return intent
