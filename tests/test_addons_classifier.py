"""Tests for addon file classification."""
import pytest

from berth.addons.classifier import (
    AddonFile,
    Category,
    MergeStrategy,
    classify,
    classify_files,
    filter_yaml_files,
    split_ext,
)


class TestFilterYamlFiles:
    """Only .yaml and .yml files take part in composition."""

    def test_keeps_yaml_in_order(self):
        names = ["b.yml", "notes.txt", "a.yaml", "README", "c.json"]
        assert filter_yaml_files(names) == ["b.yml", "a.yaml"]

    def test_extension_is_case_sensitive(self):
        """Upper-case extensions are not YAML files."""
        assert filter_yaml_files(["params.YAML", "bucket.Yml"]) == []

    def test_empty_listing(self):
        assert filter_yaml_files([]) == []

    def test_double_extension(self):
        """Only the final extension matters."""
        assert filter_yaml_files(["backup.yaml.bak", "table.tar.yml"]) == ["table.tar.yml"]


class TestSplitExt:
    """Extension splitting at the last dot."""

    @pytest.mark.parametrize("name,expected", [
        ("params.yaml", ("params", ".yaml")),
        ("a.b.yml", ("a.b", ".yml")),
        ("Makefile", ("Makefile", "")),
        (".yaml", ("", ".yaml")),
    ])
    def test_split(self, name, expected):
        assert split_ext(name) == expected


class TestClassify:
    """Reserved base names route to parameters and outputs."""

    @pytest.mark.parametrize("name", ["params.yaml", "params.yml"])
    def test_params(self, name):
        assert classify(name) is Category.PARAMETERS

    @pytest.mark.parametrize("name", ["outputs.yaml", "outputs.yml"])
    def test_outputs(self, name):
        assert classify(name) is Category.OUTPUTS

    @pytest.mark.parametrize("name", [
        "s3-bucket.yaml", "Params.yaml", "param.yaml", "my-outputs.yml", "params-extra.yaml",
    ])
    def test_everything_else_is_a_resource(self, name):
        assert classify(name) is Category.RESOURCES

    def test_classify_files_drops_non_yaml(self):
        result = classify_files(["notes.txt", "params.yaml", "outputs.yml", "x.yaml"])
        assert result == [
            AddonFile("params.yaml", Category.PARAMETERS),
            AddonFile("outputs.yml", Category.OUTPUTS),
            AddonFile("x.yaml", Category.RESOURCES),
        ]


class TestCategory:
    """Merge strategy and requirement text per category."""

    def test_strategies(self):
        assert Category.PARAMETERS.strategy is MergeStrategy.REPLACE
        assert Category.OUTPUTS.strategy is MergeStrategy.REPLACE
        assert Category.RESOURCES.strategy is MergeStrategy.APPEND

    def test_requirements(self):
        assert Category.PARAMETERS.requirement == "params.yaml"
        assert Category.OUTPUTS.requirement == "outputs.yaml"
        assert "s3-bucket.yaml" in Category.RESOURCES.requirement
