"""Adapters – record stores and the HTTP surface."""
