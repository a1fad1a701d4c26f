"""
Apoxer - game discovery and "looking for group" social hub.

Run with ``flask --app apoxer.app:create_app run``.
"""
