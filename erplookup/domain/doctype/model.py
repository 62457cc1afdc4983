"""DocType schema models as returned by the Frappe resource API."""

from pydantic import BaseModel


class DocType(BaseModel):
    """A DocType row from /api/resource/DocType."""

    name: str
    module: str | None = None
    custom: bool = False
    label: str | None = None
    is_submittable: bool = False
    is_child_table: bool = False
    track_changes: bool = False
    description: str | None = None

    model_config = {"extra": "allow"}


class DocField(BaseModel):
    fieldname: str
    fieldtype: str
    label: str | None = None
    reqd: bool = False
    options: str | None = None
    description: str | None = None

    model_config = {"extra": "allow"}


class DocTypeMeta(BaseModel):
    """DocType definition, used to find the title field."""

    name: str
    fields: list[DocField] = []
    is_submittable: bool = False
    title_field: str | None = None

    model_config = {"extra": "allow"}

    @property
    def search_field(self) -> str:
        """Field used for `like` searches."""
        return self.title_field or "name"
