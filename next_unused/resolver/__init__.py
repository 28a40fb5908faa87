"""Specifier resolution: aliases, extensions, directory indexes."""

from __future__ import annotations

from next_unused.resolver.alias_config import load_alias_config, match_alias, strip_jsonc
from next_unused.resolver.module_resolver import ModuleResolver

__all__ = [
    "ModuleResolver",
    "load_alias_config",
    "match_alias",
    "strip_jsonc",
]
