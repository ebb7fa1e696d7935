"""
Field client.

Picks media, uploads it to the relay, speaks the result and records
every georeferenced answer in the session's ReportSession.
"""
