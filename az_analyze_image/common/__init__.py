"""Pieces shared by the v3.2 and v4.0 clients.

Nothing in here knows about either API version's wire schema:
- secret handling for the subscription key
- image input variants (URL reference or raw bytes)
- header building, redaction and transport error wrapping
- execution of the single outbound call
"""
