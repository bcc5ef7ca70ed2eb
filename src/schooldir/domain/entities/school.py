"""School entity and the payloads used to create one.

A School is registered through the directory collaborator's create operation
and is never updated or deleted by this application.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from datetime import datetime

# Form fields a user must fill in, in display order.
REQUIRED_FIELDS: tuple[str, ...] = ("name", "address", "city", "state", "contact", "email_id")


@dataclass(frozen=True)
class School:
    """A registered school as returned by the directory collaborator.

    Attributes:
        id: Identifier assigned by the collaborator on create. ``None`` only when
            the collaborator acknowledged a create without echoing the record.
        name: School name.
        address: Street address.
        city: City.
        state: State or province.
        contact: 10-digit contact number.
        email_id: Lower-cased contact email.
        image: Stored logo reference (URL or path), empty when absent.
        created_at: Creation timestamp set by the collaborator.
    """

    id: int | None
    name: str
    address: str
    city: str
    state: str
    contact: str
    email_id: str
    image: str = ""
    created_at: datetime | None = None

    @property
    def monogram(self) -> str:
        """First letter of the name, shown when the school has no logo."""
        return self.name[:1].upper()

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state}"


@dataclass(frozen=True)
class SchoolDraft:
    """The create payload: every School field except ``id`` and ``created_at``."""

    name: str
    address: str
    city: str
    state: str
    contact: str
    email_id: str
    image: str = ""

    @classmethod
    def from_form(cls, values: Mapping[str, str | None]) -> "SchoolDraft":
        """Build a draft from raw form values, trimming text and lower-casing the email."""

        def clean(key: str) -> str:
            return (values.get(key) or "").strip()

        return cls(
            name=clean("name"),
            address=clean("address"),
            city=clean("city"),
            state=clean("state"),
            contact=clean("contact"),
            email_id=clean("email_id").lower(),
        )

    def with_image(self, image: str) -> "SchoolDraft":
        return replace(self, image=image)

    def to_payload(self) -> dict[str, str]:
        return asdict(self)

    def to_school(self, school_id: int | None = None) -> School:
        return School(id=school_id, **self.to_payload())


@dataclass(frozen=True)
class ImageAttachment:
    """A logo file selected on the add-school form."""

    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)
