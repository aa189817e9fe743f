from pydantic import BaseModel, ConfigDict

from .source import Origin


class LawFirm(BaseModel):
    """Law firm listing."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    location: str = ""
    phone: str = ""
    website: str = ""
    specialties: tuple[str, ...] = ()
    experience: str = ""
    success_rate: str = ""
    notable_settlements: tuple[str, ...] = ()
    origin: Origin = "google_sheets"
