"""Human-readable reports built from audit results."""

from .packet import render_compliance_packet, risk_level

__all__ = ["render_compliance_packet", "risk_level"]
