"""Adapters exposing hledger reports to users."""
