"""Assinatura JWT (HS256) de tokens de usuário e do token de servidor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import jwt

if TYPE_CHECKING:
    from datetime import datetime

JWT_ALGORITHM = "HS256"
AUTH_TYPE = "jwt"


def encode_token(payload: dict[str, Any], secret: str) -> str:
    """Assina payload com o secret da aplicação.

    Raises:
        ValueError: Se o secret estiver vazio
    """
    if not secret:
        raise ValueError("api_secret é obrigatório para assinar tokens")
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def create_server_token(secret: str) -> str:
    """Token usado no header Authorization de toda chamada server-side."""
    return encode_token({"server": True}, secret)


def create_user_token(
    user_id: str,
    secret: str,
    exp: int | datetime | None = None,
    iat: int | datetime | None = None,
) -> str:
    """Gera token de usuário para clientes front-end.

    Função pura: mesmas entradas geram o mesmo token.

    Args:
        user_id: ID do usuário
        secret: Secret da aplicação
        exp: Expiração (epoch em segundos ou datetime)
        iat: Emitido em (epoch em segundos ou datetime)

    Returns:
        JWT assinado com HS256
    """
    payload: dict[str, Any] = {"user_id": user_id}
    if exp is not None:
        payload["exp"] = exp
    if iat is not None:
        payload["iat"] = iat
    return encode_token(payload, secret)


def build_auth_headers(server_token: str) -> dict[str, str]:
    """Headers de autenticação server-side."""
    return {
        "Authorization": server_token,
        "stream-auth-type": AUTH_TYPE,
    }
