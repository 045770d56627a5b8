"""Dialogue engine: data model, matcher, motivation classifier, orchestrator."""
