"""Plain resource that is not part of a wormhole."""

from dataclasses import dataclass

from .Resource import Resource


@dataclass(frozen=True)
class OtherResource(Resource):
    """Any non-wormhole resource (a URL, a file attachment)."""

    spec: str
    title: str = ""

    def to_dict(self) -> dict[str, object]:
        return {"type": "url", "spec": self.spec, "title": self.title}
