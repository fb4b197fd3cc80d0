"""Schemas — Pydantic models for request payloads and response envelopes."""
