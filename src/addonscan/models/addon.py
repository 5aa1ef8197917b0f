"""
Add-on record model.

An Addon describes one installed add-on directory, built from the metadata in
its `.toc` manifest. Attachments (e.g. Bagnon_Bank, Bagnon_Config under
Bagnon) are nested under their primary add-on.
"""

from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Addon(BaseModel):
    """
    One installed add-on or attachment.

    Records are immutable once built. Optional fields stay None when the
    manifest does not declare them; an attachment usually carries no version
    because its primary add-on owns that information.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="Display name taken from the manifest's Title line",
    )

    version: Optional[str] = Field(
        None,
        description="Version string from the manifest's Version line",
    )

    path: Path = Field(
        ...,
        description="Directory the add-on was loaded from",
    )

    # Probably a URL type eventually; nothing populates it yet.
    update_site: Optional[str] = Field(
        None,
        description="Remote update location (reserved)",
    )

    attachments: Optional[tuple["Addon", ...]] = Field(
        None,
        description="Child add-ons bundled under this one",
    )

    @property
    def directory_name(self) -> str:
        """Name of the directory this record was scanned from."""
        return self.path.name

    def has_attachments(self) -> bool:
        """Check if any attachments are grouped under this add-on."""
        return bool(self.attachments)

    def with_attachments(self, children: Iterable["Addon"]) -> "Addon":
        """
        Return a copy of this record owning the given attachments.

        An empty iterable clears the field back to None.
        """
        grouped = tuple(children)
        return self.model_copy(update={"attachments": grouped or None})
