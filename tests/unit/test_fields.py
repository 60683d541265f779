"""
Field descriptor tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field, PrivateAttr

from envrecord.core.errors import InvalidDestinationKindError
from envrecord.core.fields import (
    FieldKind,
    classify,
    describe_fields,
    setting,
    type_name,
)


@dataclass
class AppConfig:
    name: str = setting("", required=True)
    workers: int = setting(0, default="4")
    verbose: bool = False
    hosts: list[str] = setting([])
    ports: List[int] = field(default_factory=list)
    flags: list[bool] = setting([])
    ratio: float = 0.0
    _internal: str = ""


class AppSettings(BaseModel):
    name: str = Field("", json_schema_extra={"required": "true", "owner": "ops"})
    workers: int = Field(0, json_schema_extra={"default": "4"})
    _token: str = PrivateAttr(default="")


class TestClassify:
    """Annotation to kind mapping."""

    @pytest.mark.parametrize(
        ("annotation", "kind"),
        [
            (str, FieldKind.STRING),
            (int, FieldKind.INT),
            (bool, FieldKind.BOOL),
            (list[str], FieldKind.STRING_LIST),
            (list[int], FieldKind.INT_LIST),
            (list[bool], FieldKind.BOOL_LIST),
            (List[int], FieldKind.INT_LIST),
            (float, FieldKind.UNSUPPORTED),
            (dict[str, str], FieldKind.UNSUPPORTED),
            (list, FieldKind.UNSUPPORTED),
            (list[float], FieldKind.UNSUPPORTED),
            (tuple[int, ...], FieldKind.UNSUPPORTED),
            (Optional[int], FieldKind.UNSUPPORTED),
        ],
    )
    def test_classify(self, annotation, kind: FieldKind) -> None:
        assert classify(annotation) is kind

    def test_type_name(self) -> None:
        assert type_name(float) == "float"
        assert type_name(list[dict]) == "list[dict]"
        assert type_name(List[int]) == "List[int]"


class TestDescribeDataclass:
    """Descriptors derived from dataclasses."""

    def test_declaration_order(self) -> None:
        names = [d.name for d in describe_fields(AppConfig())]

        assert names == ["name", "workers", "verbose", "hosts", "ports", "flags", "ratio", "_internal"]

    def test_kinds_and_tags(self) -> None:
        descs = {d.name: d for d in describe_fields(AppConfig())}

        assert descs["name"].required is True
        assert descs["name"].key == "NAME"
        assert descs["workers"].default == "4"
        assert descs["workers"].kind is FieldKind.INT
        assert descs["ports"].kind is FieldKind.INT_LIST
        assert descs["ratio"].kind is FieldKind.UNSUPPORTED
        assert descs["ratio"].type_name == "float"

    def test_private_fields_inaccessible(self) -> None:
        descs = {d.name: d for d in describe_fields(AppConfig())}

        assert descs["_internal"].accessible is False
        assert descs["name"].accessible is True

    def test_fresh_on_every_call(self) -> None:
        """Descriptors are rebuilt per call."""
        conf = AppConfig()

        assert describe_fields(conf) == describe_fields(conf)
        assert describe_fields(conf) is not describe_fields(conf)

    @pytest.mark.parametrize("dest", [{}, [], 3, AppConfig])
    def test_rejects_non_records(self, dest) -> None:
        with pytest.raises(InvalidDestinationKindError):
            describe_fields(dest)


class TestDescribeModel:
    """Descriptors derived from pydantic models."""

    def test_fields_then_private_attrs(self) -> None:
        descs = describe_fields(AppSettings())

        assert [d.name for d in descs] == ["name", "workers", "_token"]
        assert descs[-1].accessible is False

    def test_tags_from_json_schema_extra(self) -> None:
        """Unrecognized keys in json_schema_extra are ignored."""
        name, workers, _ = describe_fields(AppSettings())

        assert name.required is True
        assert name.default is None
        assert workers.default == "4"
        assert workers.required is False


class TestSetting:
    """The dataclass field helper."""

    def test_tags_written_to_metadata(self) -> None:
        f = setting("", required=True, default="x", metadata={"doc": "name"})

        assert f.metadata == {"doc": "name", "required": "true", "default": "x"}

    def test_python_true_is_not_the_required_tag(self) -> None:
        """Only the string "true" marks a field required."""

        @dataclass
        class Conf:
            a: str = field(default="", metadata={"required": True})

        assert describe_fields(Conf())[0].required is False

    def test_list_zero_copied_per_instance(self) -> None:
        first, second = AppConfig(), AppConfig()

        first.hosts.append("a")

        assert second.hosts == []

    def test_no_zero_makes_field_mandatory_in_constructor(self) -> None:
        @dataclass
        class Conf:
            a: str = setting(required=True)

        with pytest.raises(TypeError):
            Conf()  # type: ignore[call-arg]
