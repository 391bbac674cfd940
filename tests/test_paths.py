"""Tests for FieldResolver."""

from __future__ import annotations

import pytest

from cqrs_ddd_elastic_filters import (
    UNRESTRICTED_POLICY,
    DeniedFieldError,
    FieldPolicy,
    FieldResolver,
    InvalidTargetError,
    NonallowedFieldError,
    Target,
)


@pytest.fixture
def resolver() -> FieldResolver:
    return FieldResolver(UNRESTRICTED_POLICY)


def test_joins_segments_with_dots(resolver: FieldResolver):
    assert resolver.resolve(Target(("foo", "bar"))) == "foo.bar"


def test_stringifies_index_segments(resolver: FieldResolver):
    assert resolver.resolve(Target(("items", 2, "name"))) == "items.2.name"


def test_single_segment(resolver: FieldResolver):
    assert resolver.resolve(Target(("foo",))) == "foo"


def test_records_fields_once_in_order(resolver: FieldResolver):
    resolver.resolve(Target(("b", "x")))
    resolver.resolve(Target(("a",)))
    resolver.resolve(Target(("b", "y")))
    assert resolver.fields == ["b", "a"]
    assert resolver.has_field("a")
    assert not resolver.has_field("c")


@pytest.mark.parametrize(
    "segment",
    [
        'a"b',
        "a{b",
        "a}b",
        "a;b",
        "a,b",
        "a[b",
        "a]b",
        "a:b",
        "a(b",
        "a)b",
        "a'b",
        "a*b",
        "a>b",
        "#blah",
        "a~b",
        "a@b",
        "a&b",
        "a%b",
        "a?b",
        "a`b",
        "a--b",
        "a---b",
    ],
)
def test_rejects_invalid_segments(resolver: FieldResolver, segment: str):
    target = Target(("ok", segment))
    with pytest.raises(InvalidTargetError) as exc_info:
        resolver.resolve(target)
    assert exc_info.value.pointer == target.to_json_pointer()
    assert exc_info.value.path == target.path


@pytest.mark.parametrize("segment", ["a-b", "snake_case", "with space", "a/b", "é"])
def test_accepts_valid_segments(resolver: FieldResolver, segment: str):
    assert resolver.resolve(Target((segment,))) == segment


def test_invalid_target_is_not_recorded(resolver: FieldResolver):
    with pytest.raises(InvalidTargetError):
        resolver.resolve(Target(("bad", "a*b")))
    assert resolver.fields == []


def test_denied_field():
    resolver = FieldResolver(FieldPolicy(deny=["secret"]))
    with pytest.raises(DeniedFieldError) as exc_info:
        resolver.resolve(Target(("secret", "token")))
    assert exc_info.value.field == "secret"
    assert resolver.fields == []


def test_nonallowed_field():
    resolver = FieldResolver(FieldPolicy(allow=["public"]))
    assert resolver.resolve(Target(("public", "name"))) == "public.name"
    with pytest.raises(NonallowedFieldError):
        resolver.resolve(Target(("private",)))


def test_policy_checked_before_segments():
    resolver = FieldResolver(FieldPolicy(deny=["secret"]))
    with pytest.raises(DeniedFieldError):
        resolver.resolve(Target(("secret", "a*b")))
