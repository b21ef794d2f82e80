"""User Management package.

Organized by feature modules (users, ...) with a service layer that depends on
repository protocols, and MySQL-backed repository implementations.
"""
