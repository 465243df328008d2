"""Tests for configuration validation."""

from __future__ import annotations

from godspeed_installer.config.validation import (
    ValidationSeverity,
    has_errors,
    validate_config,
)


class TestValidateConfig:
    def test_valid_config_has_no_issues(self) -> None:
        data = {
            "version": 1,
            "shell_profile": "~/.zshrc",
            "versions": {"daemon": "1.1.2", "nvm": "0.39.7"},
            "packages": {"cli": "x", "rag_node": "y", "pnpm": "pnpm@9"},
            "daemon": {"set_executable": False},
            "secrets": {"env_key": "GOOGLE_API_KEY"},
        }
        assert validate_config(data, "test.yml") == []

    def test_unknown_top_level_key_warns_with_suggestion(self) -> None:
        issues = validate_config({"pakages": {}}, "test.yml")

        assert len(issues) == 1
        assert issues[0].severity is ValidationSeverity.WARNING
        assert issues[0].key == "pakages"
        assert issues[0].suggestion == "packages"
        assert not has_errors(issues)

    def test_unknown_section_key_warns(self) -> None:
        issues = validate_config({"versions": {"demon": "1.0"}}, "test.yml")

        assert issues[0].key == "versions.demon"
        assert issues[0].suggestion == "daemon"

    def test_section_must_be_mapping(self) -> None:
        issues = validate_config({"packages": ["cli"]}, "test.yml")
        assert has_errors(issues)
        assert issues[0].key == "packages"

    def test_bool_type_enforced(self) -> None:
        issues = validate_config({"daemon": {"set_executable": "true"}}, "test.yml")
        assert has_errors(issues)
        assert "must be a boolean" in issues[0].message

    def test_string_type_enforced(self) -> None:
        issues = validate_config({"secrets": {"env_key": ["A"]}}, "test.yml")
        assert has_errors(issues)

    def test_integer_version_accepted(self) -> None:
        assert validate_config({"versions": {"daemon": 2}}, "test.yml") == []

    def test_float_version_rejected(self) -> None:
        issues = validate_config({"versions": {"daemon": 1.1}}, "test.yml")

        assert has_errors(issues)
        assert issues[0].key == "versions.daemon"
        assert "quoted string" in issues[0].message

    def test_bool_version_rejected(self) -> None:
        assert has_errors(validate_config({"versions": {"nvm": True}}, "test.yml"))

    def test_version_must_be_integer(self) -> None:
        assert has_errors(validate_config({"version": "one"}, "test.yml"))

    def test_issue_str_includes_source_and_suggestion(self) -> None:
        issue = validate_config({"secretz": {}}, "cfg.yml")[0]
        assert str(issue) == "cfg.yml: Unknown key 'secretz' (did you mean 'secrets'?)"
