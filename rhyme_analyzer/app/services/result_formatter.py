"""Plain-text rendering of analysis results."""

from __future__ import annotations

from typing import List, Sequence

from rhyme_analyzer.core import AnalysisResult


class AnalysisResultFormatter:
    """Render the rhyme map, rhyme clusters and vowel echo clusters."""

    def format_result(self, result: AnalysisResult, *, show_assonance: bool = True) -> str:
        if not result.scheme:
            return "Nothing to analyze."

        lines: List[str] = [f"Rhyme map: {' '.join(result.scheme)}", ""]

        if not result.rhyme_groups:
            lines.append("No rhyme clusters at current cutoffs.")
        for number, group in enumerate(result.rhyme_groups, start=1):
            lines.append(f"Cluster {number}: {self._chips(result, group, mark_position=True)}")

        if show_assonance and result.assonance_clusters:
            lines.extend(["", "Vowel echo clusters"])
            for number, cluster in enumerate(result.assonance_clusters, start=1):
                lines.append(f"Echo {number}: {self._chips(result, cluster)}")

        return "\n".join(lines)

    @staticmethod
    def _chips(result: AnalysisResult, members: Sequence[int], *, mark_position: bool = False) -> str:
        chips = []
        for span_index in members:
            span = result.spans[span_index]
            if mark_position:
                chips.append(f"{span.word} ({'end' if span.is_line_end else 'internal'})")
            else:
                chips.append(span.word)
        return ", ".join(chips)


__all__ = ["AnalysisResultFormatter"]
