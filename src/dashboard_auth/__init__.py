"""Credential verification backend for the dashboard login flow."""
