"""Developer tooling: opt-in instrumentation shared by the engine and GUI."""
