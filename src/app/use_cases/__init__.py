"""Casos de uso (inputs/outputs, IO apenas via protocolos)."""
