"""Match history display, scoreboards and match detail loading."""
