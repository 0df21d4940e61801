"""Knowledge base contracts for keyword-overlap retrieval."""

from pydantic import BaseModel, ConfigDict


class KnowledgeChunk(BaseModel):
    """A citation-backed snippet used to ground a reply. Read-only."""
    model_config = ConfigDict(frozen=True)

    id: str
    topic: str
    content: str
    source: str = ""
    relevance: tuple[str, ...] = ()


class ScoredChunk(BaseModel):
    chunk: KnowledgeChunk
    score: float = 0.0
