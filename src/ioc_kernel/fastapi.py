# ioc_kernel/fastapi.py (framework)
"""
FastAPI glue
──────────────────────────────────────────────
• attach_container(app, container) → app.state.ioc_container
• get_container(request)           → the attached container (raises if none)
• resolved(IFoo, "name")            → dependency for Depends(...)
• create_kernel_app(...)           → app with container + error handlers

Usage:
    app = create_kernel_app(title="Reports", container=container)

    @app.get("/reports")
    def list_reports(repo: IReportRepo = Depends(resolved(IReportRepo))):
        ...
──────────────────────────────────────────────
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from fastapi import FastAPI, HTTPException, Request, status

from ioc_kernel.di.container import Container
from ioc_kernel.web.errors import add_error_handlers, error_envelope

STATE_ATTR = "ioc_container"


def attach_container(app: FastAPI, container: Container) -> None:
    setattr(app.state, STATE_ATTR, container)


def get_container(request: Request) -> Container:
    """Return the container attached to the app, or raise if none is attached."""
    container: Container | None = getattr(request.app.state, STATE_ATTR, None)
    if container is None:
        raise RuntimeError(
            "No container attached to this app. Did you call attach_container()?"
        )
    return container


def resolved(base_type: Any, name: Optional[str] = None, *, required: bool = False) -> Callable[[Request], Any]:
    """
    Build a dependency that resolves 'base_type' per request.

    The container's own contract applies: an unresolved type gives None.
    With required=True that None becomes a 500 with the kernel error envelope.
    """

    def _resolve(request: Request) -> Any:
        value = get_container(request).resolve(base_type, name)
        if value is None and required:
            type_name = getattr(base_type, "__qualname__", repr(base_type))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=error_envelope("UNRESOLVED", f"Nothing registered for {type_name}", {"name": name}),
            )
        return value

    return _resolve


def create_kernel_app(*, title: str = "App", container: Optional[Container] = None) -> FastAPI:
    """Create an app with a container attached (a fresh one if none is given)."""
    app = FastAPI(title=title)
    attach_container(app, container or Container())
    add_error_handlers(app)
    return app
