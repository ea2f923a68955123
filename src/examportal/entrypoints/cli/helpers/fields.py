"""Click callbacks for repeated ``KEY=VALUE`` style options.

- ``parse_fields``: extra record fields; values are decoded as JSON when they
  parse (``score=12`` gives ``12``, ``tags=["a"]`` a list) and kept as plain
  strings otherwise.
- ``parse_form_values``: raw form control values, never decoded.
- ``parse_required_fields``: ``NAME`` or ``NAME:MESSAGE`` required-field specs.
"""

from __future__ import annotations

import json
from typing import Any

import click

from examportal.service_layer.validation import FieldSpec


def _split_pair(item: str) -> tuple[str, str]:
    try:
        key, value = item.split("=", 1)
    except ValueError as e:
        raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}") from e
    if not (key := key.strip()):
        raise click.BadParameter(f"Missing KEY in {item!r}")
    return key, value


def _decode(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError:
        return value


def parse_fields(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, Any]:
    """Click callback turning repeated KEY=VALUE options into extra record fields.

    Later repetitions of a key win.

    Raises:
        click.BadParameter: If an item is not of the form KEY=VALUE.
    """
    fields: dict[str, Any] = {}
    for item in value:
        key, raw = _split_pair(item)
        fields[key] = _decode(raw)
    return fields


def parse_form_values(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Click callback turning repeated KEY=VALUE options into raw form values.

    Raises:
        click.BadParameter: If an item is not of the form KEY=VALUE.
    """
    return dict(_split_pair(item) for item in value)


def parse_required_fields(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[FieldSpec]:
    """Click callback turning ``NAME[:MESSAGE]`` options into field specs.

    Raises:
        click.BadParameter: If an item has an empty NAME.
    """
    specs: list[FieldSpec] = []
    for item in value:
        name, _, message = item.partition(":")
        if not (name := name.strip()):
            raise click.BadParameter(f"Missing field name in {item!r}")
        specs.append(FieldSpec(name=name, message=message.strip() or None))
    return specs
