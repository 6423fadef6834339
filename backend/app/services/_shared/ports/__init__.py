"""
app.services._shared.ports
==========================

Ports (hexagonal interfaces) the service layer depends on.

- :mod:`token_provider`: :class:`~.TokenProvider`, the abstraction for
  signing and decoding access tokens, plus :class:`~.StubTokenProvider`
  for unit tests.

Concrete adapters live under ``app.infra``.
"""

from __future__ import annotations

from .token_provider import StubTokenProvider, TokenProvider

__all__ = ["TokenProvider", "StubTokenProvider"]
