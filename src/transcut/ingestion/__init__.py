"""Transcription collaborators and the transcribe flow."""
