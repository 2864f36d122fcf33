"""Host-side wiring around the rhyme analysis engine."""
