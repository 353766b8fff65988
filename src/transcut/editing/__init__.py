"""Word editing: keep-ranges, session, playback sync, export."""
