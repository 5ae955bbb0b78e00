"""Generation of a project's templates from a selected value set."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from typing import Protocol

from .core.errors import NotFoundError, SelectionError
from .core.models import Config, Project, Template
from .rendering.engine import render_and_write

logger = logging.getLogger(__name__)

OVERRIDES_ONLY_NAME = "overrides"


class Chooser(Protocol):
    """Source of uniformly random choices, e.g. :class:`random.Random`."""

    def choice(self, seq: Sequence[str]) -> str: ...


_default_rng = random.Random()


def select_values(
    project: Project,
    values_name: str | None,
    overrides: Sequence[tuple[str, str]],
    use_random: bool,
    rng: Chooser | None = None,
) -> tuple[str, dict[str, str], dict[str, str]]:
    """Pick the active value table and merge overrides onto it.

    Args:
        project: Project to select from
        values_name: Explicit value set name
        overrides: Key/value pairs that win over the value set
        use_random: Pick a random value set when no name is given
        rng: Random source for ``use_random``

    Returns:
        Value set name, merged values ordered by key and the set's raw vars
    """
    if values_name is not None:
        value_set = project.value_sets.get(values_name)
        if value_set is None:
            raise NotFoundError(
                f"No values named '{values_name}' found in project '{project.name}'"
            )
    elif use_random:
        if not project.value_sets:
            raise SelectionError(f"Project '{project.name}' has no values")
        chosen = (rng or _default_rng).choice(list(project.value_sets))
        logger.debug(f"Randomly selected values '{chosen}'")
        value_set = project.value_sets[chosen]
    elif overrides:
        value_set = None
    else:
        raise SelectionError(
            "Must supply a value set name or random flag (or at least one override)"
        )

    if value_set is None:
        name, base, raw_vars = OVERRIDES_ONLY_NAME, {}, {}
    else:
        name, base, raw_vars = value_set.name, dict(value_set.values), dict(value_set.vars)

    for key, value in overrides:
        base[key] = value

    return name, dict(sorted(base.items())), raw_vars


def select_templates(project: Project, template_name: str | None) -> list[Template]:
    """Return the template named ``template_name``, or all templates."""
    if template_name is not None:
        templates = [t for t in project.templates if t.name == template_name]
        if not templates:
            raise NotFoundError(
                f"No template named '{template_name}' found in project '{project.name}'"
            )
        return templates

    if not project.templates:
        raise SelectionError(f"No templates found in project '{project.name}'")
    return list(project.templates)


def generate(
    project_name: str,
    values_name: str | None,
    overrides: Sequence[tuple[str, str]],
    use_random: bool,
    template_name: str | None,
    config: Config,
    *,
    rng: Chooser | None = None,
    echo: Callable[[str], None] = print,
) -> list[str]:
    """Render and write the selected templates of a project.

    Templates are processed in project order. The first failure aborts the
    run; templates written before it are kept.

    Args:
        project_name: Project to generate
        values_name: Value set to use
        overrides: Key/value pairs that win over the value set
        use_random: Pick a random value set when ``values_name`` is None
        template_name: Only generate this template
        config: Loaded projects
        rng: Random source for ``use_random``
        echo: Receives one line per generated template

    Returns:
        Names of the generated templates
    """
    project = config.projects.get(project_name)
    if project is None:
        raise NotFoundError(f"No project named '{project_name}' found")

    name, values, raw_vars = select_values(project, values_name, overrides, use_random, rng)
    templates = select_templates(project, template_name)

    logger.debug(
        f"Generating {len(templates)} template(s) of '{project_name}' with values '{name}'"
    )

    generated: list[str] = []
    for template in templates:
        render_and_write(template, values, name, raw_vars)
        echo(f"Generated template '{template.name}'")
        generated.append(template.name)

    return generated
