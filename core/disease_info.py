"""Static per-disease guidance shown next to a prediction."""

from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from core.errors import UnknownDiseaseError
from core.utils import DiseaseEntry, DiseaseLabel


_ENTRIES: List[DiseaseEntry] = [
    DiseaseEntry(
        label=DiseaseLabel.CATARACT,
        color=("#EAB308", "#F97316"),
        description="A cataract is a clouding of the eye's lens that can blur or dim vision.",
        recommendation="Consult an ophthalmologist for further evaluation.",
    ),
    DiseaseEntry(
        label=DiseaseLabel.DIABETIC_RETINOPATHY,
        color=("#EF4444", "#EC4899"),
        description="Diabetic retinopathy is damage to the blood vessels of the retina caused by diabetes.",
        recommendation="Contact an eye specialist promptly and keep your blood sugar under control.",
    ),
    DiseaseEntry(
        label=DiseaseLabel.GLAUCOMA,
        color=("#A855F7", "#6366F1"),
        description="Glaucoma is damage to the optic nerve that can lead to blindness.",
        recommendation="An eye pressure test and a consultation with an ophthalmologist are needed.",
    ),
    DiseaseEntry(
        label=DiseaseLabel.NORMAL,
        color=("#22C55E", "#10B981"),
        description="Based on the image analysis, your eye appears to be healthy.",
        recommendation="Have a routine eye examination every 6-12 months.",
    ),
]

DISEASE_TABLE: Mapping[DiseaseLabel, DiseaseEntry] = MappingProxyType(
    {entry.label: entry for entry in _ENTRIES}
)


def lookup(
    label: Union[DiseaseLabel, str],
    table: Optional[Mapping[DiseaseLabel, DiseaseEntry]] = None,
) -> DiseaseEntry:
    """Get the entry for a disease label.

    Accepts the enum member or its string value ("Glaucoma"). Anything else
    raises UnknownDiseaseError rather than falling back to a default entry.
    """
    if table is None:
        table = DISEASE_TABLE
    if not isinstance(label, DiseaseLabel):
        try:
            label = DiseaseLabel(label)
        except ValueError:
            raise UnknownDiseaseError(label) from None
    try:
        return table[label]
    except KeyError:
        raise UnknownDiseaseError(label.value) from None


def all_entries() -> List[DiseaseEntry]:
    """Get every entry in display order."""
    return list(_ENTRIES)
