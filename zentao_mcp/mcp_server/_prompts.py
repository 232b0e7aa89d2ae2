"""Prompt templates that steer an agent towards the create_* tools."""

from __future__ import annotations

from dataclasses import dataclass

from zentao_mcp.exceptions import ArgumentError, ZenTaoError


@dataclass(frozen=True)
class PromptSpec:
    name: str
    title: str
    description: str
    arguments: tuple[tuple[str, str], ...]
    message: str


PROMPTS = (
    PromptSpec(
        name="create_product",
        title="Create Product",
        description="Create a new product in ZenTao",
        arguments=(("name", "Product name"), ("code", "Product code")),
        message="Create a product with the specified details",
    ),
    PromptSpec(
        name="create_story",
        title="Create Story",
        description="Create a new user story",
        arguments=(("title", "Story title"), ("product", "Product ID")),
        message="Create a user story with the specified details",
    ),
)

_BY_NAME = {p.name: p for p in PROMPTS}


def render_prompt(name: str, arguments: dict | None = None) -> tuple[str, str]:
    """Return ``(title, text)`` for a prompt.

    Every declared argument is required; supplied values are listed under
    the instruction line in declaration order.
    """
    spec = _BY_NAME.get(name)
    if spec is None:
        raise ZenTaoError(f"Unknown prompt: {name}")
    arguments = arguments or {}
    lines = [spec.message + ":"]
    for arg, _ in spec.arguments:
        value = arguments.get(arg)
        if not value:
            raise ArgumentError(f"missing required argument: {arg}")
        lines.append(f"- {arg}: {value}")
    return spec.title, "\n".join(lines)
