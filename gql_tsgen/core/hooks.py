"""Hooks that adjust a generation run.

Pre-generation hooks edit the merged registry before request projections
are resolved; post-generation hooks rewrite the rendered TypeScript text
before it is written. The command line builds its hooks from
``--exclude-prefix``, ``--exclude-suffix`` and ``--header``; library
callers can pass their own to ``generate_types``:

    class StripDeprecated:
        def pre_generate(self, registry):
            registry.types.pop("LegacyUser", None)
            return registry
"""

import logging
from typing import Iterable, Protocol, runtime_checkable

from .config import GenerateConfig
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)


@runtime_checkable
class PreGenerateHook(Protocol):
    """Receives the merged registry and returns the one to generate from."""

    def pre_generate(self, registry: SchemaRegistry) -> SchemaRegistry:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Receives the output file name and rendered text, returns the text to write."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Put a comment block, such as a license notice, above the generated banner.

    Example:
        hook = AddHeaderHook("// Copyright 2024 My Company")
    """

    def __init__(self, header: str):
        self.header = header.rstrip("\n")

    def post_generate(self, _filename: str, content: str) -> str:
        return f"{self.header}\n\n{content}"


class FilterTypesHook:
    """Drop object/interface types and enums by name.

    A name is dropped when it starts with an excluded prefix, ends with
    an excluded suffix, or, when include prefixes are given, starts with
    none of them. Root fields are never touched; a field whose type was
    dropped renders the bare name and projects to ``boolean | number``.
    """

    def __init__(
        self,
        exclude_prefixes: Iterable[str] = (),
        exclude_suffixes: Iterable[str] = (),
        include_prefixes: Iterable[str] = (),
    ):
        self.exclude_prefixes = tuple(exclude_prefixes)
        self.exclude_suffixes = tuple(exclude_suffixes)
        self.include_prefixes = tuple(include_prefixes)

    def keeps(self, name: str) -> bool:
        if name.startswith(self.exclude_prefixes) or name.endswith(self.exclude_suffixes):
            return False
        return not self.include_prefixes or name.startswith(self.include_prefixes)

    def pre_generate(self, registry: SchemaRegistry) -> SchemaRegistry:
        dropped = [n for n in [*registry.types, *registry.enums] if not self.keeps(n)]
        if dropped:
            logger.debug("Filtered out: %s", ", ".join(sorted(dropped)))
        registry.types = {k: v for k, v in registry.types.items() if self.keeps(k)}
        registry.enums = {k: v for k, v in registry.enums.items() if self.keeps(k)}
        return registry


class HookRunner:
    """Applies pre- and post-generation hooks in registration order."""

    def __init__(
        self,
        pre_hooks: Iterable[PreGenerateHook] = (),
        post_hooks: Iterable[PostGenerateHook] = (),
    ):
        self.pre_hooks: list[PreGenerateHook] = list(pre_hooks)
        self.post_hooks: list[PostGenerateHook] = list(post_hooks)

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def extend(self, other: "HookRunner"):
        """Append another runner's hooks after this runner's own."""
        self.pre_hooks.extend(other.pre_hooks)
        self.post_hooks.extend(other.post_hooks)

    def run_pre_hooks(self, registry: SchemaRegistry) -> SchemaRegistry:
        for hook in self.pre_hooks:
            registry = hook.pre_generate(registry)
        return registry

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content


def hooks_from_config(config: GenerateConfig) -> HookRunner:
    """Build the hooks requested by a run's settings."""
    runner = HookRunner()
    if config.exclude_prefixes or config.exclude_suffixes:
        runner.add_pre_hook(
            FilterTypesHook(
                exclude_prefixes=config.exclude_prefixes,
                exclude_suffixes=config.exclude_suffixes,
            )
        )
    if config.header:
        runner.add_post_hook(AddHeaderHook(config.header))
    return runner
