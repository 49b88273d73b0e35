"""Registration, resolve() lookup order and clear()."""
from sample_types import Bar, ConsoleLogger, Foo, IFoo, ILogger, IRepository, OrdersController, OrdersRepository, ReportService


def test_mapping_constructs_a_new_object_each_time(container):
    container.register(IFoo, Foo)

    first = container.resolve(IFoo)
    second = container.resolve(IFoo)

    assert isinstance(first, Foo)
    assert isinstance(second, Foo)
    assert first is not second


def test_mapped_object_gets_constructor_and_member_dependencies(container):
    container.register(IFoo, Foo)
    container.register(ILogger, ConsoleLogger)
    container.register(ReportService, ReportService)

    service = container.resolve(ReportService)

    assert isinstance(service.foo, Foo)
    assert isinstance(service.logger, ConsoleLogger)


def test_registered_instance_is_returned_as_is(container):
    foo = Foo()
    container.register_instance(IFoo, foo)

    assert container.resolve(IFoo) is foo
    assert container.resolve(IFoo) is foo


def test_instance_wins_over_mapping(container):
    foo = Foo()
    container.register_instance(IFoo, foo, "n")
    container.register(IFoo, Bar, "n")

    assert container.resolve(IFoo, "n") is foo


def test_registered_none_instance_still_wins(container):
    container.register_instance(IFoo, None)
    container.register(IFoo, Foo)

    assert container.resolve(IFoo) is None


def test_names_select_registrations(container):
    container.register(IFoo, Foo, "a")
    container.register(IFoo, Bar, "b")

    assert isinstance(container.resolve(IFoo, "a"), Foo)
    assert isinstance(container.resolve(IFoo, "b"), Bar)
    assert container.resolve(IFoo) is None
    assert container.resolve(IFoo, "c") is None


def test_empty_name_means_default_registration(container):
    container.register(IFoo, Foo, "")
    assert isinstance(container.resolve(IFoo), Foo)


def test_reregistration_overwrites(container):
    container.register(IFoo, Foo)
    container.register(IFoo, Bar)
    assert isinstance(container.resolve(IFoo), Bar)

    first, second = Foo(), Foo()
    container.register_instance(Foo, first, "x")
    container.register_instance(Foo, second, "x")
    assert container.resolve(Foo, "x") is second


def test_require_instance_ignores_mappings(container):
    container.register(IFoo, Foo)
    assert container.resolve(IFoo, None, True) is None

    foo = Foo()
    container.register_instance(IFoo, foo)
    assert container.resolve(IFoo, None, True) is foo


def test_unknown_type_resolves_to_none(container):
    assert container.resolve(IFoo) is None
    assert container.resolve(IFoo, "a") is None


def test_constructor_args_pass_through_resolve(container):
    container.register(IRepository, OrdersRepository)
    bar = Bar()

    repo = container.resolve(IRepository, None, False, bar)

    assert isinstance(repo, OrdersRepository)
    assert repo.foo is bar


def test_clear_empties_every_table(container):
    container.register(IFoo, Foo)
    container.register(IFoo, Bar, "b")
    container.register_instance(ILogger, ConsoleLogger())
    container.register_instance(IFoo, Foo(), "named")
    container.register_relation(OrdersController, IRepository, OrdersRepository)

    container.clear()

    assert container.resolve(IFoo) is None
    assert container.resolve(IFoo, "b") is None
    assert container.resolve(ILogger) is None
    assert list(container.resolve_all(IFoo)) == []
    assert container.resolve_relation(OrdersController, IRepository) is None
    assert len(container.mappings) == len(container.instances) == len(container.relationship_mappings) == 0
