"""
Konduto transport layer.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from konduto.client.transport.base import HttpRequest, HttpResponse, Transport
from konduto.client.transport.http import RequestsTransport

__all__ = ["HttpRequest", "HttpResponse", "Transport", "RequestsTransport"]
