"""periodica.database.models

Record types for the periodic table dataset.

Field names follow the JSON document where they are already readable; a few
are renamed through aliases so the Python side reads naturally:

    number   -> atomic_number
    boil     -> boiling_point
    melt     -> melting_point
    cpk-hex  -> color_hex

Records are frozen. Sequences are stored as tuples.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SubstancePhase(str, Enum):
    """Physical state at standard conditions."""

    SOLID = "Solid"
    LIQUID = "Liquid"
    GAS = "Gas"
    UNDETERMINED = "Undetermined"

    @classmethod
    def from_raw(cls, raw: Any) -> "SubstancePhase":
        """Map the dataset's phase string; anything unrecognized is UNDETERMINED."""
        if raw in ("Solid", "Liquid", "Gas"):
            return cls(raw)
        return cls.UNDETERMINED


class SubstanceImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str = ""
    attribution: str = ""

    def __str__(self) -> str:
        return f"{self.title} - {self.url}"


class Substance(BaseModel):
    """One element of the periodic table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    symbol: str
    atomic_number: int = Field(alias="number")
    period: int
    group: int

    appearance: Optional[str] = None
    atomic_mass: Optional[float] = None
    boiling_point: Optional[float] = Field(default=None, alias="boil")
    melting_point: Optional[float] = Field(default=None, alias="melt")
    category: str = ""
    density: Optional[float] = None
    discovered_by: Optional[str] = None
    molar_heat: Optional[float] = None
    named_by: Optional[str] = None
    phase: SubstancePhase = SubstancePhase.UNDETERMINED
    source: Optional[str] = None
    bohr_model_image: Optional[str] = None
    bohr_model_3d: Optional[str] = None
    spectral_img: Optional[str] = None
    summary: Optional[str] = None

    # Layout coordinates: standard table (xpos, ypos) and wide table (wxpos, wypos)
    xpos: int = 0
    ypos: int = 0
    wxpos: int = 0
    wypos: int = 0

    shells: Tuple[int, ...] = ()
    electron_configuration: Optional[str] = None
    electron_configuration_semantic: Optional[str] = None
    electron_affinity: Optional[float] = None
    electronegativity_pauling: Optional[float] = None
    ionization_energies: Tuple[Optional[float], ...] = ()
    color_hex: Optional[str] = Field(default=None, alias="cpk-hex")
    image: Optional[SubstanceImage] = None
    block: str = ""

    @field_validator("phase", mode="before")
    @classmethod
    def _coerce_phase(cls, value: Any) -> SubstancePhase:
        return SubstancePhase.from_raw(value)

    def __str__(self) -> str:
        return f"[{self.atomic_number}] [Period {self.period}, Group {self.group}] {self.name}"
