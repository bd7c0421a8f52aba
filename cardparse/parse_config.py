"""
I centralize the knobs of the list parser. I expose ParseConfig with typed fields and a
from_env helper that reads environment defaults and applies caller overrides on top.

Key classes/functions: ParseConfig — delimiter and strict flag; from_env — construct a
config from environment plus overrides; _env_flag/_env_str — read environment values;
_coerce_bool/_coerce_str — normalize override values.

Inputs: optional overrides dict and environment variables CARDPARSE_DELIMITER and
CARDPARSE_STRICT. Outputs: a populated ParseConfig. Invariants: the delimiter is never
empty (an empty value falls back to ","); explicit overrides win over the environment.
Unknown override keys are ignored.

External dependencies: Python stdlib only. Side effects: none beyond reading
environment variables.
"""

from dataclasses import dataclass
import os
from typing import Optional, Dict, Any

from cardparse.constants import DEFAULT_DELIMITER, ENV_DELIMITER, ENV_STRICT


_TRUE_WORDS = ("1", "true", "t", "yes", "y", "on")
_FALSE_WORDS = ("0", "false", "f", "no", "n", "off")


def _coerce_bool(x: Any, default: bool) -> bool:
	if isinstance(x, bool):
		return bool(x)

	if isinstance(x, (int, float)):
		return bool(x)

	if isinstance(x, str):
		v = x.strip().lower()

		if v in _TRUE_WORDS:
			return True
		else:
			if v in _FALSE_WORDS:
				return False
			else:
				return bool(default)

	return bool(default)


def _coerce_str(x: Any, default: str) -> str:
	if isinstance(x, str) and x:
		return x
	return default


def _env_flag(name: str, default: bool) -> bool:
	val = os.getenv(name, None)

	if val is None:
		return bool(default)
	else:
		return _coerce_bool(val, default)


def _env_str(name: str, default: str) -> str:
	return _coerce_str(os.getenv(name, None), default)


@dataclass
class ParseConfig:
	delimiter: str = DEFAULT_DELIMITER
	strict: bool = True

	@staticmethod
	def from_env(
	 overrides: Optional[Dict[str, Any]] = None
	) -> "ParseConfig":
		cfg = ParseConfig(
		 delimiter=_env_str(ENV_DELIMITER, DEFAULT_DELIMITER),
		 strict=_env_flag(ENV_STRICT, True),
		)

		if overrides:
			if "delimiter" in overrides:
				cfg.delimiter = _coerce_str(overrides["delimiter"], DEFAULT_DELIMITER)
			if "strict" in overrides:
				cfg.strict = _coerce_bool(overrides["strict"], cfg.strict)

		return cfg
