"""View rendering configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field


class ViewConfig(BaseModel):
    """Where the named-view factory looks for templates."""

    templates_dir: Optional[str] = Field(None, description="Directory of view templates; packaged templates when unset")
    template_suffix: str = Field(".txt.j2", description="Suffix appended to a view name to find its template")
