"""Core business logic — rules, sequence generation, fingerprints, validation and models.

This module is framework-agnostic. It has no dependency on Flask or any
server framework; the service layer and the HTTP server import from here.
"""
