"""Realtime infrastructure (Socket.IO client).

This package holds the connection wrapper and the identity binder so every
screen that needs pushed events shares the same connection discipline.
"""
