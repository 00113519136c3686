"""
Forwarding gateway: query templates, upstream client and the gateway HTTP app.
"""

from userdir.gateway.forwarding_gateway import ForwardingGateway
from userdir.gateway.template_registry import QueryTemplateRegistry

__all__ = ["ForwardingGateway", "QueryTemplateRegistry"]
