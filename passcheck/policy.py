"""Configurable password policy rules."""

import json
import re
from typing import Any, Callable, Dict, List, Mapping


BLACKLIST = [
    "password", "123456", "qwerty", "letmein", "welcome",
    "monkey", "dragon", "master", "abc123", "admin",
]
WORD_SPLIT = re.compile(r"[\s-]+")

_CAMEL_ALIASES = {
    "minLength": "min_length",
    "requireUppercase": "require_uppercase",
    "requireLowercase": "require_lowercase",
    "requireNumber": "require_number",
    "requireSymbol": "require_symbol",
    "requireWords": "require_words",
    "minWords": "min_words",
    "blockBlacklist": "block_blacklist",
}
_INT_FIELDS = ("min_length", "min_words")


class PolicyConfig:
    def __init__(
        self,
        min_length: int = 14,
        require_uppercase: bool = True,
        require_lowercase: bool = True,
        require_number: bool = True,
        require_symbol: bool = False,
        require_words: bool = True,
        min_words: int = 2,
        block_blacklist: bool = True,
    ) -> None:
        self.min_length = min_length
        self.require_uppercase = require_uppercase
        self.require_lowercase = require_lowercase
        self.require_number = require_number
        self.require_symbol = require_symbol
        self.require_words = require_words
        self.min_words = min_words
        self.block_blacklist = block_blacklist

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PolicyConfig":
        """Build a config from snake_case or camelCase settings; unknown keys are ignored."""
        known = set(_CAMEL_ALIASES.values())
        kwargs: Dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _CAMEL_ALIASES.get(raw_key, raw_key)
            if key not in known:
                continue
            if key in _INT_FIELDS:
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ValueError(f"{raw_key} must be a non-negative integer.")
            elif not isinstance(value, bool):
                raise ValueError(f"{raw_key} must be true or false.")
            kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in _CAMEL_ALIASES.values()}


class Rule:
    def __init__(self, rule_id: str, label: str, message: str, test: Callable[[str], bool]) -> None:
        self.id = rule_id
        self.label = label
        self.message = message
        self.test = test


def count_words(password: str) -> int:
    return len([word for word in WORD_SPLIT.split(password) if len(word) >= 2])


def build_rules(config: PolicyConfig) -> List[Rule]:
    rules = [
        Rule(
            "length",
            f"At least {config.min_length} characters",
            f"Must be at least {config.min_length} characters",
            lambda v: len(v) >= config.min_length,
        )
    ]
    if config.require_uppercase:
        rules.append(Rule("uppercase", "Contains an uppercase letter", "Must contain an uppercase letter",
                          lambda v: re.search(r"[A-Z]", v) is not None))
    if config.require_lowercase:
        rules.append(Rule("lowercase", "Contains a lowercase letter", "Must contain a lowercase letter",
                          lambda v: re.search(r"[a-z]", v) is not None))
    if config.require_number:
        rules.append(Rule("number", "Contains a number", "Must contain a number",
                          lambda v: re.search(r"[0-9]", v) is not None))
    if config.require_symbol:
        rules.append(Rule("symbol", "Contains a symbol (!@#$...)", "Must contain a symbol",
                          lambda v: re.search(r"[^A-Za-z0-9\s]", v) is not None))
    if config.require_words:
        rules.append(Rule(
            "words",
            f"Contains at least {config.min_words} words",
            f"Must contain at least {config.min_words} words",
            lambda v: count_words(v) >= config.min_words,
        ))
    if config.block_blacklist:
        rules.append(Rule("blacklist", "Not a common weak password", "Password contains a common weak pattern",
                          lambda v: not any(weak in v.lower() for weak in BLACKLIST)))
    return rules


def evaluate_rules(password: str, config: PolicyConfig) -> Dict[str, bool]:
    return {rule.id: rule.test(password) for rule in build_rules(config)}


def describe_rules(config: PolicyConfig) -> List[str]:
    return [rule.label for rule in build_rules(config)]


def failed_messages(password: str, config: PolicyConfig) -> List[str]:
    """Validation messages for every rule the password breaks."""
    if not password:
        return ["Password is required"]
    return [rule.message for rule in build_rules(config) if not rule.test(password)]


def load_policy_config(path: str) -> PolicyConfig:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            loaded = json.load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read policy config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in policy config {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("Policy config JSON must be an object.")
    return PolicyConfig.from_dict(loaded)
