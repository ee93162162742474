"""Plain-text rendering of similarity reports."""
from models import NeighborMatch, PairError, SimilarityReport

DEFAULT_PREVIEW_DIMS = 10


def format_vector_preview(vector: list[float], preview_dims: int = DEFAULT_PREVIEW_DIMS) -> str:
    """Format the first dimensions of a vector, e.g. `[0.418, 0.250 ...]`."""
    values = ", ".join(f"{v:.3f}" for v in vector[:preview_dims])
    return f"[{values} ...]"


def render_vector_preview(report: SimilarityReport, preview_dims: int = DEFAULT_PREVIEW_DIMS) -> str:
    lines = [f"Word vectors (first {preview_dims} dims):"]
    for lookup in report.lookups:
        if lookup.found:
            lines.append(f"{lookup.word}: {format_vector_preview(lookup.vector, preview_dims)}")
        else:
            lines.append(f"{lookup.word}: not found in vocabulary")
    return "\n".join(lines)


def render_pairs(report: SimilarityReport) -> str:
    """One line per pair in enumeration order, skipped pairs included where they fall."""
    entries = sorted([*report.pairs, *report.errors], key=lambda entry: entry.pair_index)

    lines = ["Word similarity:"]
    for entry in entries:
        if isinstance(entry, PairError):
            lines.append(f"{entry.word_1} vs {entry.word_2}: skipped ({entry.error_type}: {entry.message})")
        else:
            lines.append(f"{entry.word_1} vs {entry.word_2}: {entry.score:.3f} ({entry.label.value})")
    return "\n".join(lines)


def render_report(
    report: SimilarityReport,
    preview_dims: int = DEFAULT_PREVIEW_DIMS,
    title: str | None = None,
) -> str:
    """Render the vector preview followed by every pair score."""
    sections = []
    if title:
        sections.append("\n".join(["=" * 60, title, "=" * 60]))
    sections.append(render_vector_preview(report, preview_dims))
    sections.append(render_pairs(report))
    return "\n\n".join(sections)


def render_neighbors(word: str, matches: list[NeighborMatch]) -> str:
    """Render the nearest stored words for a query word."""
    lines = ["-" * 26, f'Most similar words to "{word}":']
    if matches:
        lines.extend(f"  {m.word} ({m.similarity:.3f})" for m in matches)
    else:
        lines.append("  (no matches)")
    lines.append("-" * 26)
    return "\n".join(lines)
