"""Membership Intake - application intake and review service."""
