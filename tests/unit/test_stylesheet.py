"""Tests for the shadcn stylesheet renderer."""

from __future__ import annotations

from modetokens.core.ir import ExportResult, ResolvedVariable
from modetokens.core.stylesheet import render_stylesheet


def _variable(clean: str, light: str, dark: str) -> ResolvedVariable:
    return ResolvedVariable(
        name=f"base/{clean}", clean_name=clean, light_value=light, dark_value=dark
    )


EXPECTED = """\
@import "tailwindcss";
@import "tw-animate-css";

@custom-variant dark (&:is(.dark *));

@theme inline {
  --radius-sm: calc(var(--radius) - 4px);
  --radius-md: calc(var(--radius) - 2px);
  --radius-lg: var(--radius);
  --radius-xl: calc(var(--radius) + 4px);
  --color-background: var(--background);
  --color-sidebar-accent: var(--sidebar-accent);
}

:root {
  --radius: 0.625rem;
  --background: oklch(1 0 0);
  --sidebar-accent: oklch(0.968 0.007 247.9);
}

.dark {
  --background: oklch(0.129 0.042 264.7);
  --sidebar-accent: oklch(0.279 0.041 260);
}

@layer base {
  * { @apply border-border outline-ring/50; }
  body { @apply bg-background text-foreground; }
}"""


class TestRenderStylesheet:
    def test_exact_layout(self) -> None:
        result = ExportResult(
            variables=[
                _variable("background", "oklch(1 0 0)", "oklch(0.129 0.042 264.7)"),
                _variable(
                    "sidebar-accent", "oklch(0.968 0.007 247.9)", "oklch(0.279 0.041 260)"
                ),
            ],
            collection_name="Mode",
        )

        assert render_stylesheet(result) == EXPECTED

    def test_preserves_resolution_order(self) -> None:
        result = ExportResult(
            variables=[
                _variable("ring", "oklch(0 0 0)", "oklch(1 0 0)"),
                _variable("accent", "oklch(0 0 0)", "oklch(1 0 0)"),
                _variable("border", "oklch(0 0 0)", "oklch(1 0 0)"),
            ],
            collection_name="Mode",
        )

        css = render_stylesheet(result)

        positions = [css.index(f"--color-{name}:") for name in ("ring", "accent", "border")]
        assert positions == sorted(positions)
        root = css[css.index(":root {") : css.index(".dark {")]
        assert root.index("--ring:") < root.index("--accent:") < root.index("--border:")

    def test_each_block_lists_every_variable_once(self) -> None:
        result = ExportResult(
            variables=[_variable("primary", "oklch(0.2 0.1 30)", "oklch(0.9 0.1 30)")],
            collection_name="Mode",
        )

        css = render_stylesheet(result)

        assert css.count("--color-primary: var(--primary);") == 1
        assert css.count("--primary: oklch(0.2 0.1 30);") == 1
        assert css.count("--primary: oklch(0.9 0.1 30);") == 1

    def test_empty_result_still_renders_skeleton(self) -> None:
        css = render_stylesheet(ExportResult(variables=[], collection_name="Mode"))

        assert "@theme inline {" in css
        assert ".dark {\n}" in css
        assert not css.endswith("\n")
