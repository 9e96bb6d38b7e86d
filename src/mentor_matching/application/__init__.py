"""Application use cases wiring domain rules to injected collaborators."""
