"""Resolução da origem de arquivos enviados via multipart."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    import httpx

UploadSource = str | os.PathLike[str] | bytes | IO[bytes]

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_FILENAME = "file"


def resolve_upload(source: UploadSource, http_client: httpx.Client) -> tuple[str, bytes]:
    """Obtém (nome do arquivo, conteúdo) da origem informada.

    Args:
        source: URL http(s), caminho local, bytes ou arquivo binário aberto
        http_client: Cliente usado para baixar URLs remotas

    Returns:
        (filename, content)

    Raises:
        httpx.HTTPStatusError: Se o download de uma URL falhar
        FileNotFoundError: Se o caminho local não existir
    """
    if isinstance(source, bytes):
        return DEFAULT_FILENAME, source

    if isinstance(source, str) and urlparse(source).scheme in ("http", "https"):
        response = http_client.get(source)
        response.raise_for_status()
        name = Path(urlparse(source).path).name or DEFAULT_FILENAME
        return name, response.content

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        return path.name, path.read_bytes()

    name = Path(str(getattr(source, "name", DEFAULT_FILENAME))).name
    return name, source.read()
