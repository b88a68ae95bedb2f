"""Versão do SDK."""

VERSION = "1.0.0"
