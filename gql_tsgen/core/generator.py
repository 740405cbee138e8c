"""TypeScript generator for merged GraphQL schemas.

Renders a Jinja2 template to produce one TypeScript source file with
enums, interfaces, the Query/Mutation roots and request projections.

Supports custom templates via the template_dir parameter:
    generator = TypeScriptGenerator(registry, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GenerateConfig
from .errors import OutputWriteError
from .hooks import HookRunner, hooks_from_config
from .ir import IRField, RequestProjectionSet
from .parser import SchemaParser
from .registry import SchemaRegistry
from .resolver import RequestShapeResolver
from .scalars import ScalarRegistry
from .translator import translate

logger = logging.getLogger(__name__)


class TypeScriptGenerator:
    """Generates TypeScript declarations from a SchemaRegistry.

    Available templates to override:
        - types.ts.j2 — the whole generated file
    """

    TEMPLATE_NAME = "types.ts.j2"

    def __init__(
        self,
        registry: SchemaRegistry,
        scalars: Optional[ScalarRegistry] = None,
        template_dir: Optional[str] = None,
    ):
        """Initialize the generator.

        Args:
            registry: The merged schema definitions
            scalars: Scalar to TypeScript mapping, defaults to the built-in table
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.registry = registry
        self.scalars = scalars or ScalarRegistry()
        self.template_dir = template_dir

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["ts_field"] = self._ts_field_filter

    def _ts_field_filter(self, field: IRField) -> str:
        """Jinja2 filter rendering ``name: T;`` or ``name?: Nullable<T>;``."""
        translated = translate(field.type_ref, self.scalars)
        if translated.nullable:
            return f"{field.name}?: Nullable<{translated.expression}>;"
        return f"{field.name}: {translated.expression};"

    def render(self, projections: Optional[RequestProjectionSet] = None) -> str:
        """Render the complete file in memory."""
        if projections is None:
            projections = RequestShapeResolver(self.registry).resolve()
        context: Dict[str, Any] = {
            "enums": self.registry.sorted_enums(),
            "types": self.registry.sorted_types(),
            "queries": self.registry.sorted_queries(),
            "mutations": self.registry.sorted_mutations(),
            "projections": list(projections),
        }
        return self.env.get_template(self.TEMPLATE_NAME).render(context)


def write_output(output_path: Path, content: str):
    """Replace the output file with the fully rendered content."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), e.strerror or str(e)) from e


@dataclass
class GenerationResult:
    output_path: Path
    registry: SchemaRegistry
    projections: RequestProjectionSet
    content: str


def generate_types(
    config: GenerateConfig,
    hooks: Optional[HookRunner] = None,
    on_file: Optional[Callable[[str], None]] = None,
) -> GenerationResult:
    """Run a whole generation: parse, merge, resolve, render, write.

    Hooks built from the config run first, then those in ``hooks``.
    ``on_file`` is called with each schema path before it is parsed.
    Any error aborts the run before the output file is touched.
    """
    runner = hooks_from_config(config)
    if hooks:
        runner.extend(hooks)
    registry = SchemaRegistry(skip_checks=config.skip_checks)
    parser = SchemaParser(str(config.input_path), registry, config.extensions)

    for file_path in parser.collect_schema_files():
        if on_file:
            on_file(file_path)
        parser.parse_file(file_path)

    registry = runner.run_pre_hooks(registry)
    projections = RequestShapeResolver(registry).resolve()
    logger.debug(
        "Resolved %d types, %d enums, %d request projections",
        len(registry.types), len(registry.enums), len(projections),
    )

    generator = TypeScriptGenerator(
        registry,
        scalars=ScalarRegistry(config.scalars),
        template_dir=str(config.template_dir) if config.template_dir else None,
    )
    content = generator.render(projections)
    content = runner.run_post_hooks(config.output_path.name, content)

    write_output(config.output_path, content)
    return GenerationResult(
        output_path=config.output_path,
        registry=registry,
        projections=projections,
        content=content,
    )
