"""HTTP API for the reflection chat."""
