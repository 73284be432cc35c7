"""Ordered field rules for request bodies."""
import re
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

# local@domain.tld, no whitespace
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FieldRule(NamedTuple):
    name: str
    message: str
    email_message: str | None = None


USER_RULES = (
    FieldRule("firstName", 'Please provide "firstName"'),
    FieldRule("lastName", 'Please provide "lastName"'),
    FieldRule("emailAddress", 'Please provide "emailAddress"', 'Please provide valid "email address"'),
    FieldRule("password", 'Please provide "password"'),
)

COURSE_RULES = (
    FieldRule("title", 'Please provide "title"'),
    FieldRule("description", 'Please provide "description"'),
)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value.strip()))


def validate(rules: Sequence[FieldRule], body: Mapping[str, Any]) -> list[str]:
    """Return one message per failing rule, in rule order; empty means valid."""
    errors = []
    for rule in rules:
        value = body.get(rule.name)
        if is_blank(value):
            errors.append(rule.message)
        elif rule.email_message and not is_email(str(value)):
            errors.append(rule.email_message)
    return errors
