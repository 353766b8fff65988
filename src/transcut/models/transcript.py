"""Transcript data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Word(BaseModel):
    """A single transcribed word with timing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str = Field(alias="word")
    start: float
    end: float

    @model_validator(mode="after")
    def _check_times(self) -> Word:
        if self.start > self.end:
            raise ValueError(f"word {self.id!r} ends before it starts")
        return self

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, time: float) -> bool:
        return self.start <= time <= self.end


class Segment(BaseModel):
    """A transcript segment, roughly one sentence."""

    id: int
    start: float
    end: float
    text: str
    words: list[Word] | None = None

    @property
    def duration(self) -> float:
        return self.end - self.start


class Transcript(BaseModel):
    """Segments plus the detected language."""

    segments: list[Segment] = Field(default_factory=list)
    language: str | None = None

    def words(self) -> list[Word]:
        return [w for s in self.segments for w in (s.words or [])]

    @property
    def end_time(self) -> float:
        ends = [s.end for s in self.segments] + [w.end for w in self.words()]
        return max(ends, default=0.0)


class TranscriptResult(BaseModel):
    """What the transcription collaborator hands back for one input."""

    segments: list[Segment] = Field(default_factory=list)
    words: list[Word] = Field(default_factory=list)
    duration_seconds: float = 0.0
    input_path: str
    language: str | None = None

    def to_transcript(self) -> Transcript:
        """Transcript for editing; the flat ``words`` list wins when present.

        Segments are kept as they are if their words are exactly the flat
        list. Otherwise the flat words go on one synthetic segment so every
        word stays editable.
        """
        segments = self.segments
        segment_words = [w for s in segments for w in (s.words or [])]
        if self.words and segment_words != self.words:
            segments = [
                Segment(
                    id=0,
                    start=min(w.start for w in self.words),
                    end=max(w.end for w in self.words),
                    text=" ".join(w.text for w in self.words),
                    words=list(self.words),
                )
            ]
        return Transcript(segments=segments, language=self.language)
