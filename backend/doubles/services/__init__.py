"""
Services Layer

Pure scheduling services that:
- Accept domain inputs (player rosters, generated games)
- Return domain outputs (dataclasses)
- Do NOT depend on HTTP request/response objects
- Do NOT persist or mutate anything outside the call
"""
