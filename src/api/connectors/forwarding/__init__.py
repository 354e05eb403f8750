"""Conector de callbacks do encaminhamento — único ponto de IO HTTP."""

from .http_client import CallbackHttpClient, build_callback_url, create_callback_http_client

__all__ = [
    "CallbackHttpClient",
    "build_callback_url",
    "create_callback_http_client",
]
