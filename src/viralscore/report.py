"""Plain-text rendering of an AnalysisResult.

Lays the result out in the sections a review dialog shows: score and rating,
the post itself, scoring factors, then warnings and suggestions when present.
"""

from __future__ import annotations

from viralscore.engine import AnalysisResult


def render_report(text: str, result: AnalysisResult) -> str:
    """Render a result as a human-readable report."""
    # Lone surrogates (e.g. from undecodable argv bytes) cannot be written as UTF-8
    preview = text.encode("utf-8", errors="replace").decode("utf-8")
    lines = [
        "Post Analysis",
        f"Score: {result.score} / {result.max_score}  ({result.rating.value})",
        "",
        "Your post:",
        *(f"  {line}" for line in (preview.splitlines() or [""])),
        "",
        "Scoring Factors",
    ]
    if result.factors:
        width = max(len(f.label) for f in result.factors)
        for factor in result.factors:
            mark = "+" if factor.positive else "!"
            lines.append(f"  {mark} {factor.label.ljust(width)}  {factor.display_impact:>4}")
    else:
        lines.append("  (none)")

    if result.warnings:
        lines += ["", "Warnings"]
        lines += [f"  - {w}" for w in result.warnings]

    if result.suggestions:
        lines += ["", "Suggestions to Improve"]
        lines += [f"  - {s}" for s in result.suggestions]

    return "\n".join(lines)
