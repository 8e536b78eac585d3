"""Shared kernel: domain exceptions and infrastructure services."""
