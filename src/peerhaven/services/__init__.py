"""Application services built on the matching core."""

from peerhaven.services.container import ServiceContainer, get_container, set_container

__all__ = ["ServiceContainer", "get_container", "set_container"]
