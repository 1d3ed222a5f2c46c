"""Shared abstractions: value types and collaborator interfaces."""
