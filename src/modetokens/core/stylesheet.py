"""
shadcn/Tailwind v4 stylesheet generator.

Renders an ExportResult as a ``globals.css`` in the layout shadcn/ui uses
with Tailwind v4: an ``@theme inline`` block mapping ``--color-*`` utilities
to custom properties, light values on ``:root`` and dark values on
``.dark``. Variables keep their resolution order; nothing is sorted.
"""

from __future__ import annotations

from .ir import ExportResult, ResolvedVariable

_HEADER: tuple[str, ...] = (
    '@import "tailwindcss";',
    '@import "tw-animate-css";',
    "",
    "@custom-variant dark (&:is(.dark *));",
    "",
)

_THEME_RADII: tuple[str, ...] = (
    "  --radius-sm: calc(var(--radius) - 4px);",
    "  --radius-md: calc(var(--radius) - 2px);",
    "  --radius-lg: var(--radius);",
    "  --radius-xl: calc(var(--radius) + 4px);",
)

_ROOT_RADIUS = "  --radius: 0.625rem;"

_BASE_LAYER: tuple[str, ...] = (
    "@layer base {",
    "  * { @apply border-border outline-ring/50; }",
    "  body { @apply bg-background text-foreground; }",
    "}",
)


def _theme_lines(variables: list[ResolvedVariable]) -> list[str]:
    return [f"  --color-{v.clean_name}: var(--{v.clean_name});" for v in variables]


def _value_lines(variables: list[ResolvedVariable], *, dark: bool) -> list[str]:
    return [
        f"  --{v.clean_name}: {v.dark_value if dark else v.light_value};" for v in variables
    ]


def render_stylesheet(result: ExportResult) -> str:
    """
    Render resolved variables as a shadcn-compatible stylesheet.

    Args:
        result: Export result; its variable order is the output order.

    Returns:
        CSS text ending with the closing brace of the ``@layer base`` block.
    """
    variables = result.variables
    lines: list[str] = list(_HEADER)

    lines.append("@theme inline {")
    lines.extend(_THEME_RADII)
    lines.extend(_theme_lines(variables))
    lines.append("}")
    lines.append("")

    lines.append(":root {")
    lines.append(_ROOT_RADIUS)
    lines.extend(_value_lines(variables, dark=False))
    lines.append("}")
    lines.append("")

    lines.append(".dark {")
    lines.extend(_value_lines(variables, dark=True))
    lines.append("}")
    lines.append("")

    lines.extend(_BASE_LAYER)
    return "\n".join(lines)
