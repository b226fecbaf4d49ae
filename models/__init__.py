"""Data models for decisions, market events, hidden state and the company ledger."""
