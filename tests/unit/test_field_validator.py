"""
Тесты для FieldValidator и декларативных правил

Проверяет:
1. Валидный прогон: True, errors = None, validated_data
2. Невалидный прогон: все нарушенные правила поля в порядке объявления
3. Поле без нарушений отсутствует в errors
4. Повторный прогон перезаписывает состояние (идемпотентность)
5. Данные как dict и как объект
"""

from types import SimpleNamespace

import pytest

from src.category.domain import CategoryValidator, CategoryValidatorConfig
from src.shared.domain.validators import (
    FieldRules,
    FieldValidator,
    Rule,
    is_boolean,
    is_not_empty,
    is_string,
    max_length,
)


# =============================================================================
# RULES
# =============================================================================


class TestRules:
    """Тесты для стандартных правил"""

    @pytest.mark.parametrize("value, ok", [("a", True), ("", False), (None, False), (0, True)])
    def test_is_not_empty(self, value, ok) -> None:
        assert is_not_empty().check(value) is ok

    @pytest.mark.parametrize("value, ok", [("a", True), ("", True), (1, False), (None, False)])
    def test_is_string(self, value, ok) -> None:
        assert is_string().check(value) is ok

    def test_max_length(self) -> None:
        rule = max_length(3)
        assert rule.check("abc")
        assert not rule.check("abcd")
        assert not rule.check(123)
        assert rule.format_message("name") == "name must be shorter than or equal to 3 characters"

    @pytest.mark.parametrize("value, ok", [(True, True), (False, True), (1, False), ("true", False)])
    def test_is_boolean(self, value, ok) -> None:
        assert is_boolean().check(value) is ok

    def test_optional_field_skips_rules_for_none(self) -> None:
        rules = FieldRules(rules=(is_string(),), optional=True)
        assert rules.violations("description", None) == []
        assert rules.violations("description", 1) == ["description must be a string"]

    def test_duplicate_messages_reported_once(self) -> None:
        rule = Rule(predicate=lambda v: False, message="{field} is wrong")
        rules = FieldRules(rules=(rule, rule))
        assert rules.violations("x", 1) == ["x is wrong"]


# =============================================================================
# FIELD VALIDATOR
# =============================================================================


class TestFieldValidator:
    """Тесты для FieldValidator"""

    @pytest.fixture
    def validator(self) -> FieldValidator:
        return FieldValidator(
            {
                "name": FieldRules(rules=(is_not_empty(), is_string(), max_length(5))),
                "enabled": FieldRules(rules=(is_boolean(),), optional=True),
            }
        )

    def test_valid_data(self, validator: FieldValidator) -> None:
        data = {"name": "abc", "enabled": True}
        assert validator.validate(data) is True
        assert validator.errors is None
        assert validator.validated_data is data

    def test_all_violated_rules_reported_in_order(self, validator: FieldValidator) -> None:
        assert validator.validate({"name": None}) is False
        assert validator.errors == {
            "name": [
                "name should not be empty",
                "name must be a string",
                "name must be shorter than or equal to 5 characters",
            ]
        }
        assert validator.validated_data is None

    def test_valid_fields_are_absent_from_errors(self, validator: FieldValidator) -> None:
        assert validator.validate({"name": "abc", "enabled": "yes"}) is False
        assert validator.errors == {"enabled": ["enabled must be a boolean value"]}
        assert "name" not in validator.errors

    def test_missing_field_reads_as_none(self, validator: FieldValidator) -> None:
        assert validator.validate({}) is False
        assert list(validator.errors) == ["name"]

    def test_object_attributes(self, validator: FieldValidator) -> None:
        assert validator.validate(SimpleNamespace(name="toolong", enabled=False)) is False
        assert validator.errors == {"name": ["name must be shorter than or equal to 5 characters"]}

    def test_repeated_runs_are_idempotent(self, validator: FieldValidator) -> None:
        data = {"name": 123}
        validator.validate(data)
        first = validator.errors
        validator.validate(data)
        assert validator.errors == first

    def test_new_run_clears_previous_state(self, validator: FieldValidator) -> None:
        validator.validate({"name": None})
        assert validator.validate({"name": "ok"}) is True
        assert validator.errors is None


class TestCategoryValidator:
    """Тесты для правил Category"""

    def test_number_name_reports_type_and_length(self) -> None:
        validator = CategoryValidator()
        assert validator.validate({"name": 123}) is False
        assert validator.errors == {
            "name": [
                "name must be a string",
                "name must be shorter than or equal to 255 characters",
            ]
        }

    def test_custom_max_length(self) -> None:
        validator = CategoryValidator(CategoryValidatorConfig(name_max_length=4))
        assert validator.validate({"name": "Movie"}) is False
        assert validator.errors == {
            "name": ["name must be shorter than or equal to 4 characters"]
        }

    def test_optional_fields(self) -> None:
        validator = CategoryValidator()
        assert validator.validate({"name": "Movie", "description": None, "is_active": None})
        assert validator.validate({"name": "Movie", "description": "d", "is_active": False})
