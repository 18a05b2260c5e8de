"""Membership and admission pricing for a multi-site attraction network."""
