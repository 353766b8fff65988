"""Optional LLM cleanup of transcript text.

Whisper sometimes splits a word into fragments ("dis av ivo"). The LLM joins
them and fixes spelling; the corrected words are then spread back over the
original segments with evenly divided timestamps.
"""

from __future__ import annotations

from transcut.models.transcript import Segment, Word
from transcut.utils.progress import log_step, log_warning

SYSTEM_PROMPT = (
    "You are a transcription correction assistant. Fix word fragments and "
    "spelling errors in transcriptions while keeping the same word count and timing."
)

CLEANUP_PROMPT = """Fix this transcription from Whisper. It has word fragments that need to be joined.

Rules:
1. Join word fragments (e.g. "nego cios" -> "negocios")
2. Fix obvious spelling errors
3. Keep the same approximate word count (don't add or remove content)
4. Minimal punctuation
5. Return ONLY the corrected text, no explanations

Original: {transcript_text}

Corrected:"""


def clean_segments(
    segments: list[Segment],
    api_key: str,
    *,
    model: str = "claude-sonnet-4-6",
) -> list[Segment]:
    """Return cleaned segments, or the input unchanged if cleanup is unavailable."""
    if not segments:
        return segments

    try:
        import anthropic
    except ImportError:
        log_warning(
            "anthropic package not installed, skipping transcript cleanup. "
            "Install with: pip install transcut[llm]"
        )
        return segments

    transcript_text = " ".join(s.text for s in segments)
    log_step("Cleanup", f"Sending {len(transcript_text)} chars to {model}")

    client = anthropic.Anthropic(api_key=api_key)
    try:
        message = client.messages.create(
            model=model,
            max_tokens=8192,
            temperature=0.3,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": CLEANUP_PROMPT.format(transcript_text=transcript_text)}],
        )
    except Exception as e:
        log_warning(f"Cleanup API error: {e}. Using original transcript.")
        return segments

    cleaned_text = message.content[0].text.strip() if message.content else ""
    if not cleaned_text:
        log_warning("Cleanup returned no text. Using original transcript.")
        return segments

    return redistribute_text(segments, cleaned_text)


def redistribute_text(segments: list[Segment], cleaned_text: str) -> list[Segment]:
    """Spread cleaned words over the segments, as many per segment as before.

    Inside a segment the words get equal slices of the segment's duration.
    Word ids are renumbered ``w0, w1, ...`` across the transcript.
    """
    cleaned_words = cleaned_text.split()
    result: list[Segment] = []
    word_index = 0

    for segment in segments:
        count = len(segment.words or [])
        chunk = cleaned_words[word_index:word_index + count]

        words: list[Word] = []
        if chunk:
            slot = segment.duration / len(chunk)
            for i, text in enumerate(chunk):
                start = segment.start + i * slot
                words.append(Word(id=f"w{word_index + i}", text=text, start=start, end=start + slot))

        result.append(Segment(
            id=segment.id,
            start=segment.start,
            end=segment.end,
            text=" ".join(chunk),
            words=words,
        ))
        word_index += len(chunk)

    log_step("Cleanup", f"Redistributed {word_index} words over {len(segments)} segments")
    return result
