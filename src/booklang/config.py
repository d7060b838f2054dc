"""
Interpreter configuration.

Configuration is optional. When given, it is a YAML mapping such as:

    allow_redeclaration: false
    comment_prefixes: ["//", "#"]
    banner: "Book-lang REPL (vars, conditionals & interpolation). Ctrl-D to exit."
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .errors import error_invalid_config

CONFIG_ENV_VAR = "BOOKLANG_CONFIG"

DEFAULT_BANNER = "Book-lang REPL (vars, conditionals & interpolation). Ctrl-D to exit."


@dataclass(frozen=True)
class InterpreterConfig:
    """Options controlling interpreter behavior."""
    allow_redeclaration: bool = False
    comment_prefixes: Tuple[str, ...] = ("//",)
    banner: str = DEFAULT_BANNER

    def is_comment(self, line: str) -> bool:
        return any(line.startswith(prefix) for prefix in self.comment_prefixes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], filename: Optional[str] = None) -> "InterpreterConfig":
        """Build a config from a mapping, validating keys and types."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise error_invalid_config(f"unknown key(s): {', '.join(unknown)}", filename)

        kwargs: Dict[str, Any] = {}
        if "allow_redeclaration" in data:
            value = data["allow_redeclaration"]
            if not isinstance(value, bool):
                raise error_invalid_config("'allow_redeclaration' must be true or false", filename)
            kwargs["allow_redeclaration"] = value
        if "comment_prefixes" in data:
            value = data["comment_prefixes"]
            if isinstance(value, str):
                value = [value]
            if (not isinstance(value, list)
                    or not all(isinstance(p, str) and p for p in value)):
                raise error_invalid_config("'comment_prefixes' must be a list of non-empty strings", filename)
            kwargs["comment_prefixes"] = tuple(value)
        if "banner" in data:
            value = data["banner"]
            if not isinstance(value, str):
                raise error_invalid_config("'banner' must be a string", filename)
            kwargs["banner"] = value
        return cls(**kwargs)


def load_config(path: Union[str, Path]) -> InterpreterConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or does not hold a valid mapping
    """
    import yaml

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except OSError as e:
        raise error_invalid_config(f"cannot read {path}: {e.strerror}", str(path)) from e
    except yaml.YAMLError as e:
        raise error_invalid_config(f"malformed YAML: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise error_invalid_config("top level must be a mapping", str(path))
    return InterpreterConfig.from_dict(data, str(path))


def resolve_config(path: Optional[Union[str, Path]] = None) -> InterpreterConfig:
    """Load config from path, else from $BOOKLANG_CONFIG, else use defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return InterpreterConfig()
    return load_config(path)
