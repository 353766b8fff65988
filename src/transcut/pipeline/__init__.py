"""Processing pipeline: state machine, event channel, runner."""
