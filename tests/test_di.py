import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import pytest

from edgeboot.di import Container, type_instance_to_name

SERVICE_NAME = "serviceName"


class Foo:
    __module__ = "example.pkg"


@dataclass
class FooService:
    foo_message: str


@dataclass
class BarService:
    bar_message: str
    foo: Optional[FooService]


def test_get_unknown_service():
    sut = Container({})
    assert sut.get("unknownService") is None


def test_container_without_constructors_returns_none():
    sut = Container(None)
    assert sut.get(SERVICE_NAME) is None


def test_get_known_service_returns_expected_constructor_result():
    service = object()
    sut = Container({SERVICE_NAME: lambda get: service})

    assert sut.get(SERVICE_NAME) is service


def test_get_known_service_implements_singleton():
    count = 0

    def constructor(get):
        nonlocal count
        count += 1
        return {"value": count}

    sut = Container({SERVICE_NAME: constructor})

    first = sut.get(SERVICE_NAME)
    second = sut.get(SERVICE_NAME)

    assert first["value"] == second["value"]
    assert first is second
    assert count == 1


def test_update_of_non_existent_service_adds():
    service = object()
    sut = Container({})
    sut.update({SERVICE_NAME: lambda get: service})

    assert sut.get(SERVICE_NAME) is service


def test_update_of_existing_service_replaces():
    sut = Container({SERVICE_NAME: lambda get: {"value": "original"}})
    sut.update({SERVICE_NAME: lambda get: {"value": "replacement"}})

    assert sut.get(SERVICE_NAME)["value"] == "replacement"


def test_update_discards_built_instance():
    sut = Container({SERVICE_NAME: lambda get: "original"})
    assert sut.get(SERVICE_NAME) == "original"

    sut.update({SERVICE_NAME: lambda get: "replacement"})

    assert sut.get(SERVICE_NAME) == "replacement"


def test_get_inside_get_returns_as_expected():
    sut = Container(
        {
            "foo": lambda get: FooService(foo_message="foo"),
            "bar": lambda get: BarService(bar_message="bar", foo=get("foo")),
        }
    )

    result = sut.get("bar")

    assert result.bar_message == "bar"
    assert result.foo is not None
    assert result.foo.foo_message == "foo"
    assert result.foo is sut.get("foo")


def test_constructor_returning_none_is_called_again():
    calls = []

    def constructor(get):
        calls.append(1)
        return None

    sut = Container({SERVICE_NAME: constructor})

    assert sut.get(SERVICE_NAME) is None
    assert sut.get(SERVICE_NAME) is None
    assert len(calls) == 2


def test_concurrent_gets_construct_once():
    count = 0
    counter_lock = threading.Lock()

    def constructor(get):
        nonlocal count
        with counter_lock:
            count += 1
            return {"value": count}

    sut = Container({SERVICE_NAME: constructor})

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: sut.get(SERVICE_NAME), range(16)))

    assert count == 1
    assert len(results) == 16
    assert [result["value"] for result in results] == [1] * 16
    assert all(result is results[0] for result in results)
    assert sut.get(SERVICE_NAME) is results[0]


def test_type_instance_to_name_returns_expected_module_plus_type_name():
    assert type_instance_to_name(Foo()) == "example.pkg.Foo"


def test_type_instance_to_name_of_class_names_the_class():
    assert type_instance_to_name(Foo) == "example.pkg.Foo"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, "builtins.int"),
        ("text", "builtins.str"),
        ({}, "builtins.dict"),
    ],
)
def test_type_instance_to_name_for_builtins(value, expected):
    assert type_instance_to_name(value) == expected