"""HTTP boundary for the backend service."""

from src.api.app import create_app, create_origin_guard


__all__ = ["create_app", "create_origin_guard"]
