# Application shell.
# Created: 2026-09-17

from vivarium.shell.app import create_app, mount_feature_routes

__all__ = ["create_app", "mount_feature_routes"]
