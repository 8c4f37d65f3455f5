"""
Mech-Dex backend package.

This package provides a FastAPI view API for a catalog of mechanical
keyboard switches, backed by the Firebase Realtime Database REST API
(or an in-memory store for development and tests).
"""
