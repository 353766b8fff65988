from __future__ import annotations

from transcut.models.transcript import Segment, Transcript, TranscriptResult, Word


def make_transcript(*words: tuple[str, float, float], language: str | None = "en") -> Transcript:
    word_models = [Word(id=word_id, text=word_id, start=start, end=end) for word_id, start, end in words]
    segment = Segment(
        id=0,
        start=word_models[0].start if word_models else 0.0,
        end=word_models[-1].end if word_models else 0.0,
        text=" ".join(w.text for w in word_models),
        words=word_models,
    )
    return Transcript(segments=[segment], language=language)


def abc_transcript() -> Transcript:
    return make_transcript(("a", 0.0, 1.0), ("b", 1.05, 2.0), ("c", 2.5, 3.0))


def make_result(transcript: Transcript, *, input_path: str = "talk.mp4", duration: float = 0.0) -> TranscriptResult:
    return TranscriptResult(
        segments=transcript.segments,
        words=transcript.words(),
        duration_seconds=duration,
        input_path=input_path,
        language=transcript.language,
    )
