"""Adapters — outer surfaces around the domain."""
