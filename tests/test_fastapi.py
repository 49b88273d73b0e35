import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from ioc_kernel.fastapi import attach_container, create_kernel_app, get_container, resolved

from sample_types import Foo, IFoo, IRepository, UsersController


def _app(container):
    app = create_kernel_app(title="test", container=container)

    @app.get("/foo")
    def read_foo(foo=Depends(resolved(IFoo))):
        return {"name": foo.name() if foo else None}

    @app.get("/required")
    def read_required(foo=Depends(resolved(IFoo, "missing", required=True))):
        return {"name": foo.name()}

    @app.get("/relation")
    def read_relation(request_container=Depends(get_container)):
        repo = request_container.resolve_relation_as(IRepository, UsersController)
        return {"repo": type(repo).__name__}

    return app


def test_dependency_resolves_from_the_attached_container(container):
    container.register(IFoo, Foo)
    client = TestClient(_app(container))

    res = client.get("/foo")

    assert res.status_code == 200
    assert res.json() == {"name": "foo"}


def test_unresolved_optional_dependency_is_none(container):
    client = TestClient(_app(container))

    assert client.get("/foo").json() == {"name": None}


def test_unresolved_required_dependency_is_a_500(container):
    client = TestClient(_app(container))

    res = client.get("/required")

    assert res.status_code == 500
    assert res.json()["detail"]["error"]["code"] == "UNRESOLVED"


def test_construction_errors_use_the_error_envelope(container):
    container.register_relation(UsersController, IRepository, Foo)
    client = TestClient(_app(container))

    res = client.get("/relation")

    assert res.status_code == 500
    body = res.json()["error"]
    assert body["code"] == "CONSTRUCTION_ERROR"
    assert body["details"] == {"base_type": "IRepository", "context_type": "UsersController"}


def test_attach_container_replaces_the_app_container(container):
    app = FastAPI()
    attach_container(app, container)
    container.register(IFoo, Foo)

    @app.get("/foo")
    def read_foo(foo=Depends(resolved(IFoo))):
        return {"name": foo.name()}

    assert TestClient(app).get("/foo").json() == {"name": "foo"}


def test_missing_container_raises():
    app = FastAPI()

    @app.get("/foo")
    def read_foo(foo=Depends(resolved(IFoo))):
        return {}

    with pytest.raises(RuntimeError):
        TestClient(app).get("/foo")
