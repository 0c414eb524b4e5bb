"""
Декларативные правила валидации полей

Каждое правило — пара (предикат, шаблон сообщения). Набор правил сущности —
явная таблица: имя поля → FieldRules (упорядоченный список правил).
Правила независимы: для одного поля проверяются все, без short-circuit.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping


# =============================================================================
# RULE
# =============================================================================


@dataclass(frozen=True)
class Rule:
    """
    Одно правило поля.

    predicate возвращает True, если значение удовлетворяет правилу.
    message — шаблон с плейсхолдером {field}.
    """

    predicate: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> bool:
        return self.predicate(value)

    def format_message(self, field: str) -> str:
        return self.message.format(field=field)


@dataclass(frozen=True)
class FieldRules:
    """
    Правила одного поля.

    optional=True: если значение None, правила поля не проверяются.
    """

    rules: tuple[Rule, ...]
    optional: bool = False

    def violations(self, field: str, value: Any) -> list[str]:
        """
        Сообщения о нарушениях в порядке объявления правил.

        Returns:
            Список сообщений без дубликатов (пустой если нарушений нет)
        """
        if self.optional and value is None:
            return []

        messages: list[str] = []
        for rule in self.rules:
            if rule.check(value):
                continue
            message = rule.format_message(field)
            if message not in messages:
                messages.append(message)
        return messages


RuleSet = Mapping[str, FieldRules]


# =============================================================================
# СТАНДАРТНЫЕ ПРАВИЛА
# =============================================================================


def is_not_empty() -> Rule:
    """Значение не None и не пустая строка."""
    return Rule(
        predicate=lambda v: v is not None and v != "",
        message="{field} should not be empty",
    )


def is_string() -> Rule:
    return Rule(
        predicate=lambda v: isinstance(v, str),
        message="{field} must be a string",
    )


def max_length(limit: int) -> Rule:
    """
    Строка длиной не более limit символов.

    Нестроковое значение нарушает правило (как и тип-правило).
    """
    return Rule(
        predicate=lambda v: isinstance(v, str) and len(v) <= limit,
        message=f"{{field}} must be shorter than or equal to {limit} characters",
    )


def is_boolean() -> Rule:
    # bool — подкласс int, поэтому 1/0 не проходят
    return Rule(
        predicate=lambda v: isinstance(v, bool),
        message="{field} must be a boolean value",
    )
