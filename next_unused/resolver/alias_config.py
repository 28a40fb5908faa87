"""Load path aliases from tsconfig.json / jsconfig.json and match specifiers."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from next_unused.models import AliasConfig

logger = logging.getLogger(__name__)

# Strings are kept; comments and trailing commas are dropped
_JSONC_TOKEN_RE = re.compile(
    r'"(?:\\.|[^"\\])*"'
    r"|//[^\n]*"
    r"|/\*.*?\*/"
    r"|,(?=(?:\s|//[^\n]*|/\*.*?\*/)*[}\]])",
    re.DOTALL,
)


def load_alias_config(project_root: Path, config_file: str = "tsconfig.json") -> AliasConfig:
    """Read ``compilerOptions.baseUrl`` and ``compilerOptions.paths``.

    A missing or unreadable manifest yields an empty config; resolution then
    falls back to relative and package lookup only.
    """
    config_path = project_root / config_file
    try:
        raw = config_path.read_text(encoding="utf-8")
        data = json.loads(strip_jsonc(raw))
    except (OSError, ValueError) as e:
        logger.debug("no alias config from %s: %s", config_path, e)
        return AliasConfig()

    options = data.get("compilerOptions") if isinstance(data, dict) else None
    if not isinstance(options, dict):
        options = {}

    base_url = options.get("baseUrl") or "."
    paths: dict[str, list[str]] = {}
    raw_paths = options.get("paths") or {}
    if isinstance(raw_paths, dict):
        for pattern, targets in raw_paths.items():
            if isinstance(targets, str):
                targets = [targets]
            if isinstance(targets, list):
                paths[pattern] = [t for t in targets if isinstance(t, str)]

    config = AliasConfig(base_url=(project_root / base_url).resolve(), paths=paths)
    logger.debug("loaded %d alias pattern(s) from %s", len(paths), config_path)
    return config


def strip_jsonc(text: str) -> str:
    """Turn tsconfig-flavoured JSON (comments, trailing commas) into plain JSON."""
    def _keep_strings(match: re.Match) -> str:
        token = match.group(0)
        return token if token.startswith('"') else ""

    return _JSONC_TOKEN_RE.sub(_keep_strings, text)


def match_alias(specifier: str, paths: dict[str, list[str]]) -> list[str]:
    """Return the substituted targets of the best matching alias pattern.

    Patterns hold at most one ``*``. An exact pattern beats any wildcard;
    among wildcards the longest prefix wins.
    """
    if specifier in paths and "*" not in specifier:
        return list(paths[specifier])

    best_pattern: str | None = None
    best_prefix_len = -1
    captured = ""
    for pattern in paths:
        star = pattern.find("*")
        if star < 0:
            continue
        prefix, suffix = pattern[:star], pattern[star + 1:]
        if (
            len(specifier) >= len(prefix) + len(suffix)
            and specifier.startswith(prefix)
            and specifier.endswith(suffix)
            and len(prefix) > best_prefix_len
        ):
            best_pattern = pattern
            best_prefix_len = len(prefix)
            captured = specifier[len(prefix):len(specifier) - len(suffix)]

    if best_pattern is None:
        return []
    return [target.replace("*", captured, 1) for target in paths[best_pattern]]
