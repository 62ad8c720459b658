"""Accounts service adapter."""

from .client import HttpAccountsClient, MockAccountsClient

__all__ = ["HttpAccountsClient", "MockAccountsClient"]
