"""
Pydantic schema definitions for API payloads.

Issues and users each define their own request and response models.
Response models are frozen so the store can hand out the very
instances it keeps without exposing them to mutation.
"""
