"""Constantes públicas da API Stream Chat."""

from __future__ import annotations

DEFAULT_BASE_URL: str = "https://chat.stream-io-api.com"
DEFAULT_TIMEOUT_SECONDS: float = 6.0

# Blocklist padrão mantida pelo backend (não pode ser alterada nem removida)
DEFAULT_BLOCKLIST: str = "profanity_en_2020_v1"

# Modos de remoção aceitos por delete_users
SOFT_DELETE: str = "soft"
HARD_DELETE: str = "hard"
