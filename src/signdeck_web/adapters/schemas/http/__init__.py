"""HTTP schema exports (Adapters Layer)."""

from __future__ import annotations

from .base import BaseHTTPSchema
from .envelopes import ApiErrorEnvelope, ApiSuccessEnvelope, GridEnvelope
from .fragment import FragmentContract

__all__ = [
    "ApiErrorEnvelope",
    "ApiSuccessEnvelope",
    "BaseHTTPSchema",
    "FragmentContract",
    "GridEnvelope",
]
