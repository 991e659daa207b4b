"""Cross-origin policy applied to every route."""

from dataclasses import dataclass
from typing import Tuple

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


@dataclass(frozen=True)
class CORSPolicy:
    """Declarative cross-origin rule set, identical for all paths."""

    allow_origins: Tuple[str, ...] = ("*",)
    allow_methods: Tuple[str, ...] = ("*",)
    allow_headers: Tuple[str, ...] = ("*",)
    expose_headers: Tuple[str, ...] = ("*",)
    allow_credentials: bool = False
    max_age: int = 3600  # preflight cache, seconds


PERMISSIVE_CORS_POLICY = CORSPolicy()


def install_cors(app: FastAPI, policy: CORSPolicy = PERMISSIVE_CORS_POLICY) -> None:
    """Register the policy on all routes of the app."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(policy.allow_origins),
        allow_methods=list(policy.allow_methods),
        allow_headers=list(policy.allow_headers),
        expose_headers=list(policy.expose_headers),
        allow_credentials=policy.allow_credentials,
        max_age=policy.max_age,
    )
