"""Document tree models consumed by the path encoder."""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A heading with its level and direct plain-text children."""

    type: Literal["heading"] = "heading"
    level: int
    texts: List[str] = Field(default_factory=list)
    children: List[Node] = Field(default_factory=list)

    @property
    def title(self) -> str:
        return "".join(self.texts)


class Paragraph(BaseModel):
    """A body paragraph with its direct plain-text children."""

    type: Literal["paragraph"] = "paragraph"
    texts: List[str] = Field(default_factory=list)

    @property
    def content(self) -> str:
        return "".join(self.texts).strip()


class Block(BaseModel):
    """Any other construct: lists, quotes, code. Walked, never recorded."""

    type: Literal["block"] = "block"
    kind: str
    texts: List[str] = Field(default_factory=list)
    children: List[Node] = Field(default_factory=list)


Node = Annotated[Union[Heading, Paragraph, Block], Field(discriminator="type")]


class DocumentTree(BaseModel):
    """Ordered forest of nodes in document order."""

    children: List[Node] = Field(default_factory=list)


Heading.model_rebuild()
Block.model_rebuild()
DocumentTree.model_rebuild()
