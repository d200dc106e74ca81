"""Tests for the publish.toml pydantic models."""

import pytest
from pydantic import ValidationError

from publish_easier.config.models import CopyRule, PublishConfig


class TestCopyRule:
    def test_target_and_description_default_to_source(self) -> None:
        rule = CopyRule(source="README.md")
        assert rule.type == "file"
        assert rule.target == "README.md"
        assert rule.description == "README.md"

    def test_explicit_values_kept(self) -> None:
        rule = CopyRule(type="dir", source="docs", target="doc", description="docs directory")
        assert rule.target == "doc"
        assert rule.description == "docs directory"

    def test_directory_alias(self) -> None:
        assert CopyRule(type="directory", source="docs").type == "dir"

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CopyRule(type="symlink", source="x")

    def test_source_required(self) -> None:
        with pytest.raises(ValidationError):
            CopyRule.model_validate({"type": "file"})

    def test_frozen(self) -> None:
        rule = CopyRule(source="a")
        with pytest.raises(ValidationError):
            rule.source = "b"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "fields",
        [
            {"source": "/etc/passwd"},
            {"source": "../shared/LICENSE"},
            {"source": "LICENSE", "target": "/tmp/escaped/LICENSE"},
            {"source": "LICENSE", "target": "../LICENSE"},
            {"source": "LICENSE", "target": "legal/../../LICENSE"},
        ],
    )
    def test_paths_outside_base_rejected(self, fields: dict[str, str]) -> None:
        with pytest.raises(ValidationError):
            CopyRule(**fields)

    def test_nested_relative_target_allowed(self) -> None:
        rule = CopyRule(source="LICENSE", target="legal/LICENSE.txt")
        assert rule.target == "legal/LICENSE.txt"


class TestPublishConfig:
    def test_defaults(self) -> None:
        cfg = PublishConfig()
        assert cfg.build_command is None
        assert cfg.publish_dir == "publish"
        assert cfg.manifest == "package.json"
        assert cfg.copy_rules == []
        assert cfg.filters == {}
        assert cfg.pack_command == "npm pack"
        assert cfg.publish_command == "npm publish"
        assert cfg.artifact_pattern == "*.tgz"

    def test_empty_when_nothing_set(self) -> None:
        assert PublishConfig().is_empty is True
        assert PublishConfig.model_validate({}).is_empty is True

    def test_not_empty_when_any_key_set(self) -> None:
        assert PublishConfig.model_validate({"publish_dir": "out"}).is_empty is False

    def test_toml_keys_use_aliases(self) -> None:
        cfg = PublishConfig.model_validate(
            {
                "build_command": "make",
                "copy": [{"type": "file", "source": "LICENSE"}],
                "filter": {"scripts": ["test"]},
            }
        )
        assert cfg.copy_rules[0].source == "LICENSE"
        assert cfg.filters == {"scripts": ["test"]}

    def test_populate_by_field_name(self) -> None:
        cfg = PublishConfig(build_command="make", filters={"scripts": ["dev"]})
        assert cfg.filters == {"scripts": ["dev"]}

    def test_in_place(self) -> None:
        assert PublishConfig(publish_dir="").in_place is True
        assert PublishConfig(publish_dir="publish").in_place is False

    def test_unknown_keys_ignored(self) -> None:
        cfg = PublishConfig.model_validate({"build_command": "make", "colour": "blue"})
        assert cfg.build_command == "make"

    @pytest.mark.parametrize(
        "publish_dir", ["/tmp/elsewhere", "../publish", "out/../../x", ".", "./"]
    )
    def test_publish_dir_must_stay_under_root(self, publish_dir: str) -> None:
        with pytest.raises(ValidationError):
            PublishConfig(build_command="true", publish_dir=publish_dir)

    def test_nested_publish_dir_allowed(self) -> None:
        assert PublishConfig(publish_dir="dist/publish").publish_dir == "dist/publish"

    def test_absolute_manifest_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PublishConfig(manifest="/srv/package.json")

    def test_single_filter_string_becomes_list(self) -> None:
        cfg = PublishConfig.model_validate({"filter": {"scripts": "test", "devDependencies": []}})
        assert cfg.filters == {"scripts": ["test"], "devDependencies": []}
