"""HTTP surface of the service desk: mounts the versioned blueprints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def join_prefix(base: str, relative: str) -> str:
    """Join two URL prefixes into one absolute path without doubled slashes.

    ``join_prefix("/api/v1/", "/auth")`` gives ``"/api/v1/auth"``; an empty
    ``relative`` leaves ``base`` as is.
    """
    segments = [part for part in (base.strip("/"), relative.strip("/")) if part]
    return "/" + "/".join(segments)


def mount_blueprints(
    app: Flask,
    *,
    prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> list[str]:
    """Register each ``(blueprint, relative_prefix)`` pair under ``prefix``.

    :param app: Application receiving the blueprints.
    :param prefix: Version root, e.g. ``"/api/v1"``.
    :param entries: Blueprints with the path segment they own below the root.
    :returns: The mounted prefixes, in registration order.
    """
    mounted: list[str] = []
    for bp, relative in entries:
        url_prefix = join_prefix(prefix, relative)
        app.register_blueprint(bp, url_prefix=url_prefix)
        mounted.append(url_prefix)
    return mounted


def init_app(app: Flask) -> None:
    """Mount the v1 routes below ``API_BASE_PREFIX``."""

    from app.api.v1 import API_VERSION, REGISTRY

    root = join_prefix(app.config.get("API_BASE_PREFIX", "/api"), API_VERSION)
    mounted = mount_blueprints(app, prefix=root, entries=REGISTRY)
    app.logger.debug("api.mounted", extra={"prefixes": mounted})


__all__ = ["init_app", "join_prefix", "mount_blueprints"]
