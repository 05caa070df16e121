from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class Sentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Sentence text, boundary whitespace trimmed")
    rank: int = Field(..., ge=1, description="1 is the most important sentence")
    sentence_order: int = Field(..., ge=0, description="Position of the sentence in the document")
    paragraph_order: int = Field(..., ge=0, description="Position of the enclosing paragraph")
    score: float = Field(0.0, ge=0.0, description="Term-frequency importance score")

    def __str__(self) -> str:
        return f"Sentence Order: {self.sentence_order}, Paragraph Order: {self.paragraph_order} Rank: {self.rank} \n '{self.text}'"


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Paragraph text, boundary whitespace trimmed")
    rank: int = Field(..., ge=1, description="1 is the most important paragraph")
    paragraph_order: int = Field(..., ge=0, description="Position of the paragraph in the document")
    score: float = Field(0.0, ge=0.0, description="Mean score of the paragraph's sentences")
    sentences: Tuple[Sentence, ...] = Field(default_factory=tuple, description="Member sentences in document order")

    def __str__(self) -> str:
        return f"Paragraph Order: {self.paragraph_order} Rank: {self.rank} \n '{self.text}'"
