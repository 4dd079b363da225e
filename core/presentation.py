"""Derives the view model rendered for an analysis result."""

from typing import Mapping, Optional

from core.disease_info import lookup
from core.utils import AnalysisResult, DiseaseEntry, DiseaseLabel, ViewModel, format_percentage


def present(
    result: AnalysisResult,
    table: Optional[Mapping[DiseaseLabel, DiseaseEntry]] = None,
) -> ViewModel:
    """Combine a result with its knowledge table entry.

    Raises UnknownDiseaseError if the table has no entry for the label.
    """
    entry = lookup(result.disease_label, table)
    return ViewModel(
        label=entry.label.value,
        percentage_text=format_percentage(result.confidence),
        color_token=entry.color,
        description=entry.description,
        recommendation=entry.recommendation,
        confidence=result.confidence,
    )
